from fastapi import APIRouter, Depends, status

from todo_expert.api.v1.dependencies import get_auth_service
from todo_expert.features.authentication.services import AuthService
from todo_expert.features.authentication.schemas import SignUpIn, SignInIn, TokenOut
from todo_expert.security.auth_context import BEARER_PREFIX

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={400: {"description": "Requête invalide"}},
)


def _token_out(token: str) -> TokenOut:
    return TokenOut(bearer_token=f"{BEARER_PREFIX}{token}", token=token)

# -----------------------------
# Sign-up
# -----------------------------
@router.post(
    "/signup",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenOut,
)
def signup(payload: SignUpIn, svc: AuthService = Depends(get_auth_service)):
    token = svc.sign_up(payload.email, payload.password, payload.user_role)
    return _token_out(token)

# -----------------------------
# Sign-in
# -----------------------------
@router.post(
    "/signin",
    summary="Se connecter",
    response_model=TokenOut,
    responses={401: {"description": "Mot de passe incorrect"}},
)
def signin(payload: SignInIn, svc: AuthService = Depends(get_auth_service)):
    token = svc.sign_in(payload.email, payload.password)
    return _token_out(token)
