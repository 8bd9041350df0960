"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_todo_service() : crée un TodoService à partir d’une session DB et du client météo.

get_auth_identity() : résout une seule fois par requête l'identité portée par le token.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à surcharger dans les tests (app.dependency_overrides).
"""

from typing import Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader
from sqlmodel import Session

from todo_expert.db.session import get_session
from todo_expert.core.config import settings, jwt_settings

from todo_expert.clients.weather import WeatherClient

from todo_expert.db.repositories.users import UserRepository
from todo_expert.db.repositories.todos import TodoRepository
from todo_expert.db.repositories.managers import ManagerRepository
from todo_expert.db.repositories.comments import CommentRepository

from todo_expert.features.authentication.services import AuthService
from todo_expert.features.users.services import UserService, UserAdminService
from todo_expert.features.todos.services import TodoService
from todo_expert.features.managers.services import ManagerService
from todo_expert.features.comments.services import CommentService, CommentAdminService

from todo_expert.security.auth_context import resolve_identity
from todo_expert.security.identity import AuthIdentity


# -----------------------------
# Repositories
# -----------------------------
def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)

def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)

def get_manager_repository(session: Session = Depends(get_session)) -> ManagerRepository:
    return ManagerRepository(session)

def get_comment_repository(session: Session = Depends(get_session)) -> CommentRepository:
    return CommentRepository(session)


# -----------------------------
# External clients
# -----------------------------
def get_weather_client() -> WeatherClient:
    return WeatherClient(url=settings.WEATHER_API_URL, timeout=settings.WEATHER_TIMEOUT_SECONDS)


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(user_repo: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(user_repo=user_repo, jwt_settings=jwt_settings)


# -----------------------------
# Users
# -----------------------------
def get_user_service(user_repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(user_repo)

def get_user_admin_service(user_repo: UserRepository = Depends(get_user_repository)) -> UserAdminService:
    return UserAdminService(user_repo)


# -----------------------------
# Todos / Managers / Comments
# -----------------------------
def get_todo_service(
    todo_repo: TodoRepository = Depends(get_todo_repository),
    weather_client: WeatherClient = Depends(get_weather_client),
) -> TodoService:
    return TodoService(
        repo=todo_repo,
        weather_client=weather_client,
        weather_fallback=settings.WEATHER_FALLBACK,
    )

def get_manager_service(
    manager_repo: ManagerRepository = Depends(get_manager_repository),
    todo_repo: TodoRepository = Depends(get_todo_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> ManagerService:
    return ManagerService(manager_repo=manager_repo, todo_repo=todo_repo, user_repo=user_repo)

def get_comment_service(
    comment_repo: CommentRepository = Depends(get_comment_repository),
    todo_repo: TodoRepository = Depends(get_todo_repository),
) -> CommentService:
    return CommentService(comment_repo=comment_repo, todo_repo=todo_repo)

def get_comment_admin_service(
    comment_repo: CommentRepository = Depends(get_comment_repository),
) -> CommentAdminService:
    return CommentAdminService(comment_repo)


# -----------------------------
# Authentication data
# -----------------------------
# APIKeyHeader : lit l'en-tête brut ("Bearer <jwt>") et expose "Authorize" dans Swagger
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

def get_auth_identity(
    authorization: Optional[str] = Security(authorization_header),
) -> AuthIdentity:
    return resolve_identity(authorization, jwt_settings)
