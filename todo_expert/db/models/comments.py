from sqlmodel import Field

from todo_expert.db.models.base import BaseModelDB


class Comment(BaseModelDB, table=True):
    contents: str = Field(nullable=False)

    todo_id: int = Field(foreign_key="todo.id", index=True, nullable=False)
    user_id: int = Field(foreign_key="user.id", index=True, nullable=False)
