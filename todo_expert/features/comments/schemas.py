from pydantic import BaseModel, Field as PydField

from todo_expert.features.users.schemas import UserOut


class CommentCreateIn(BaseModel):
    contents: str = PydField(..., min_length=1)


class CommentOut(BaseModel):
    id: int
    contents: str
    user: UserOut
