from sqlmodel import Field

from .base import BaseModelDB


class Todo(BaseModelDB, table=True):
    """Todo créé par un utilisateur, avec la météo du jour figée à la création."""

    title: str = Field(index=True)
    contents: str
    weather: str = Field(description="Météo au moment de la création")

    # Propriétaire : immuable après création
    user_id: int = Field(foreign_key="user.id", index=True, nullable=False)
