from sqlmodel import Field
from sqlalchemy import UniqueConstraint

from .base import BaseModelDB


class Manager(BaseModelDB, table=True):
    """Utilisateur (non propriétaire) associé à un todo."""

    __table_args__ = (
        UniqueConstraint("todo_id", "user_id", name="uq_manager_todo_user"),
    )

    todo_id: int = Field(foreign_key="todo.id", index=True, nullable=False)
    user_id: int = Field(foreign_key="user.id", index=True, nullable=False)
