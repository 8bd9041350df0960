from pydantic import BaseModel, Field

from todo_expert.features.users.schemas import UserOut


class ManagerSaveIn(BaseModel):
    manager_user_id: int = Field(..., ge=1, examples=[2])


class ManagerOut(BaseModel):
    id: int
    user: UserOut
