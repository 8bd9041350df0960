from fastapi import APIRouter, Depends, Path, Request, status

from todo_expert.api.v1.audit import admin_access_log
from todo_expert.api.v1.dependencies import (
    get_auth_identity,
    get_comment_admin_service,
    get_user_admin_service,
)
from todo_expert.features.comments.services import CommentAdminService
from todo_expert.features.users.schemas import UserRoleChangeIn
from todo_expert.features.users.services import UserAdminService
from todo_expert.security.identity import AuthIdentity

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    responses={
        401: {"description": "Token absent, invalide ou expiré"},
        403: {"description": "Rôle ADMIN requis"},
    },
)


@router.patch(
    "/users/{user_id}",
    summary="Changer le rôle d'un utilisateur",
    status_code=status.HTTP_204_NO_CONTENT,
)
@admin_access_log("change_user_role")
def change_user_role(
    request: Request,
    payload: UserRoleChangeIn,
    user_id: int = Path(..., ge=1),
    identity: AuthIdentity = Depends(get_auth_identity),
    svc: UserAdminService = Depends(get_user_admin_service),
):
    svc.change_user_role(user_id, payload.role)
    return None


@router.delete(
    "/comments/{comment_id}",
    summary="Supprimer un commentaire",
    status_code=status.HTTP_204_NO_CONTENT,
)
@admin_access_log("delete_comment")
def delete_comment(
    request: Request,
    comment_id: int = Path(..., ge=1),
    identity: AuthIdentity = Depends(get_auth_identity),
    svc: CommentAdminService = Depends(get_comment_admin_service),
):
    svc.delete_comment(comment_id)
    return None
