from typing import List

from fastapi import APIRouter, Depends, Path, status

from todo_expert.api.v1.dependencies import get_auth_identity, get_comment_service
from todo_expert.features.comments.schemas import CommentCreateIn, CommentOut
from todo_expert.features.comments.services import CommentService
from todo_expert.security.identity import AuthIdentity

router = APIRouter(
    prefix="/todos/{todo_id}/comments",
    tags=["comments"],
    responses={400: {"description": "Requête invalide"}},
)


@router.post(
    "",
    summary="Commenter un todo",
    response_model=CommentOut,
    status_code=status.HTTP_201_CREATED,
)
def save_comment(
    payload: CommentCreateIn,
    todo_id: int = Path(..., ge=1),
    identity: AuthIdentity = Depends(get_auth_identity),
    svc: CommentService = Depends(get_comment_service),
):
    return svc.save_comment(identity, todo_id, payload.contents)


@router.get(
    "",
    summary="Lister les commentaires d'un todo",
    response_model=List[CommentOut],
)
def get_comments(
    todo_id: int = Path(..., ge=1),
    svc: CommentService = Depends(get_comment_service),
):
    return svc.get_comments(todo_id)
