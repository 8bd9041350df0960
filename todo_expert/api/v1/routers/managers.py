from typing import List

from fastapi import APIRouter, Depends, Path, status

from todo_expert.api.v1.dependencies import get_auth_identity, get_manager_service
from todo_expert.features.managers.schemas import ManagerOut, ManagerSaveIn
from todo_expert.features.managers.services import ManagerService
from todo_expert.security.identity import AuthIdentity

router = APIRouter(
    prefix="/todos/{todo_id}/managers",
    tags=["managers"],
    responses={400: {"description": "Requête invalide"}},
)


@router.post(
    "",
    summary="Ajouter un manager au todo",
    status_code=status.HTTP_201_CREATED,
    response_model=ManagerOut,
)
def save_manager(
    payload: ManagerSaveIn,
    todo_id: int = Path(..., ge=1),
    identity: AuthIdentity = Depends(get_auth_identity),
    svc: ManagerService = Depends(get_manager_service),
):
    return svc.save_manager(identity, todo_id, payload.manager_user_id)


@router.get(
    "",
    summary="Lister les managers du todo",
    response_model=List[ManagerOut],
)
def get_managers(
    todo_id: int = Path(..., ge=1),
    svc: ManagerService = Depends(get_manager_service),
):
    return svc.get_managers(todo_id)


@router.delete(
    "/{manager_id}",
    summary="Retirer un manager du todo",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_manager(
    todo_id: int = Path(..., ge=1),
    manager_id: int = Path(..., ge=1),
    identity: AuthIdentity = Depends(get_auth_identity),
    svc: ManagerService = Depends(get_manager_service),
):
    svc.delete_manager(identity, todo_id, manager_id)
    return None
