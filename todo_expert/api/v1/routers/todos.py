"""
➡️ But : Définir les endpoints de l’API pour les todos.

Réceptionne les requêtes HTTP, appelle le service correspondant, retourne les schémas de sortie.
"""

from fastapi import APIRouter, Depends, Query, status
from todo_expert.api.v1.dependencies import get_auth_identity, get_todo_service
from todo_expert.features.todos.schemas import TodoCreate, TodoOut, TodoPageOut, TodoSaveOut
from todo_expert.features.todos.services import TodoService
from todo_expert.security.identity import AuthIdentity

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={400: {"description": "Requête invalide"}},
)

@router.post(
    "",
    summary="Créer un todo",
    description="La météo du jour est récupérée et figée à la création.",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoSaveOut,
)
def save_todo(
    payload: TodoCreate,
    identity: AuthIdentity = Depends(get_auth_identity),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.save_todo(identity, payload.title, payload.contents)

@router.get(
    "",
    summary="Lister les todos",
    description="Liste paginée, dernière modification en premier. `page` commence à 1.",
    response_model=TodoPageOut,
)
def get_todos(
    page: int = Query(1, ge=1, description="Numéro de page", examples=[1]),
    size: int = Query(10, ge=1, le=100, description="Taille de page", examples=[10]),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.get_todos(page, size)

@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)):
    return svc.get_todo(todo_id)
