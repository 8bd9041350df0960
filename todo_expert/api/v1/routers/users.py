"""
➡️ But : Définir les endpoints utilisateurs.

Les routes ne contiennent ni SQL ni logique métier : elles appellent le service
et retournent les schémas de sortie (response_model).
"""

from fastapi import APIRouter, Depends, status
from todo_expert.api.v1.dependencies import get_auth_identity, get_user_service
from todo_expert.features.users.schemas import ChangePasswordIn, UserOut
from todo_expert.features.users.services import UserService
from todo_expert.security.identity import AuthIdentity

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={400: {"description": "Requête invalide"}},
)

@router.get(
    "/{user_id}",
    summary="Récupérer un utilisateur",
    response_model=UserOut,
)
def get_user(user_id: int, svc: UserService = Depends(get_user_service)):
    return svc.get_user(user_id)

@router.put(
    "",
    summary="Changer le mot de passe",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "Mot de passe changé"},
        401: {"description": "Ancien mot de passe invalide ou token invalide"},
    },
)
def change_password(
    payload: ChangePasswordIn,
    identity: AuthIdentity = Depends(get_auth_identity),
    svc: UserService = Depends(get_user_service),
):
    svc.change_password(identity.id, payload.old_password, payload.new_password)
    return None
