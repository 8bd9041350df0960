"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation) pour les utilisateurs.

UserOut → réponse de l’API (jamais le hash du mot de passe)

ChangePasswordIn → corps PUT /users

UserRoleChangeIn → corps PATCH /admin/users/{user_id}
"""

from sqlmodel import SQLModel


class UserOut(SQLModel):
    id: int
    email: str


class ChangePasswordIn(SQLModel):
    old_password: str
    new_password: str


class UserRoleChangeIn(SQLModel):
    role: str
