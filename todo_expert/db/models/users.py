"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les objets persistés. Ici on représente les tables ayant un rapport avec les users,
ainsi que l'énumération fermée des rôles (USER / ADMIN).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Facile à migrer vers PostgreSQL ou MySQL plus tard.
"""

from enum import Enum

from sqlmodel import Field

from todo_expert.core.exceptions import InvalidRequest
from .base import BaseModelDB


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def of(cls, value: str) -> "UserRole":
        """Convertit un nom de rôle (insensible à la casse) en UserRole."""
        for role in cls:
            if isinstance(value, str) and role.value == value.strip().upper():
                return role
        raise InvalidRequest("유효하지 않은 UserRole")


class User(BaseModelDB, table=True):
    email: str = Field(index=True, unique=True)
    hashed_password: str
    role: UserRole = Field(default=UserRole.USER)
