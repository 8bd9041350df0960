from dataclasses import dataclass

from todo_expert.db.models.users import UserRole


@dataclass(frozen=True)
class AuthIdentity:
    """
    Identité vérifiée extraite d'un token.

    Sert uniquement aux décisions d'autorisation, jamais réécrite en base.
    """
    id: int
    email: str
    role: UserRole
