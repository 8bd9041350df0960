"""
➡️ But : Définir les formats d’entrée/sortie de l’API pour les todos.

TodoCreate → corps de requête POST

TodoSaveOut → réponse de création

TodoOut / TodoPageOut → lecture (unitaire / paginée)
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from todo_expert.features.users.schemas import UserOut


class TodoCreate(BaseModel):
    title: str = Field(..., min_length=1, examples=["Acheter du lait"])
    contents: str = Field(..., min_length=1, examples=["2 litres, demi-écrémé"])


class TodoSaveOut(BaseModel):
    id: int
    title: str
    contents: str
    weather: str
    user: UserOut


class TodoOut(BaseModel):
    id: int
    title: str
    contents: str
    weather: str
    user: UserOut
    created_at: datetime
    modified_at: datetime


class TodoPageOut(BaseModel):
    items: List[TodoOut]
    total: int
    page: int
    size: int
