"""
➡️ But : Contenir la logique métier des utilisateurs.

UserService : profil et changement de mot de passe (utilisateur connecté).

UserAdminService : changement de rôle (réservé aux ADMIN, contrôlé côté route).
"""

import logging
import re

from todo_expert.core.exceptions import AuthError, InvalidRequest
from todo_expert.db.models.base import utc_now
from todo_expert.db.models.users import User, UserRole
from todo_expert.db.repositories.users import UserRepository
from todo_expert.features.users.schemas import UserOut
from todo_expert.security.password import hash_password, verify_password

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
INVALID_NEW_PASSWORD = "새 비밀번호는 8자 이상이어야 하고, 숫자와 대문자를 포함해야 합니다."
SAME_PASSWORD = "새 비밀번호는 기존 비밀번호와 같을 수 없습니다."
WRONG_PASSWORD = "잘못된 비밀번호입니다."

_DIGIT = re.compile(r"\d")
_UPPER = re.compile(r"[A-Z]")


def is_valid_new_password(password: str) -> bool:
    return len(password) >= 8 and bool(_DIGIT.search(password)) and bool(_UPPER.search(password))


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def _get_or_fail(self, user_id: int) -> User:
        user = self.repo.get(user_id)
        if not user:
            raise InvalidRequest(USER_NOT_FOUND)
        return user

    def get_user(self, user_id: int) -> UserOut:
        user = self._get_or_fail(user_id)
        return UserOut(id=user.id, email=user.email)

    def change_password(self, user_id: int, old_password: str, new_password: str) -> None:
        if not is_valid_new_password(new_password):
            raise InvalidRequest(INVALID_NEW_PASSWORD)

        user = self._get_or_fail(user_id)

        # comparaison littérale, avant toute vérification du hash
        if old_password == new_password:
            raise InvalidRequest(SAME_PASSWORD)

        if not verify_password(old_password, user.hashed_password):
            raise AuthError(WRONG_PASSWORD)

        self.repo.update(
            user,
            hashed_password=hash_password(new_password),
            updated_at=utc_now(),
        )
        logger.info("Password changed: user_id=%s", user_id)


class UserAdminService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def change_user_role(self, user_id: int, role: str) -> None:
        user = self.repo.get(user_id)
        if not user:
            raise InvalidRequest(USER_NOT_FOUND)

        new_role = UserRole.of(role)
        self.repo.update(user, role=new_role, updated_at=utc_now())
        logger.info("Role changed: user_id=%s role=%s", user_id, new_role.value)
