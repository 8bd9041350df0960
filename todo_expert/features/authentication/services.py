import logging

from sqlalchemy.exc import IntegrityError

from todo_expert.core.exceptions import AuthError, InvalidRequest
from todo_expert.db.models.users import UserRole
from todo_expert.db.repositories.users import UserRepository
from todo_expert.security.password import verify_password, hash_password
from todo_expert.security.tokens import JWTSettings, create_access_token

logger = logging.getLogger(__name__)

EMAIL_REQUIRED = "이메일이 입력되지 않았습니다."
EMAIL_ALREADY_EXISTS = "이미 존재하는 이메일입니다."
USER_NOT_REGISTERED = "가입되지 않은 유저입니다."
WRONG_PASSWORD = "잘못된 비밀번호입니다."


class AuthService:
    """
    Service d'authentification : orchestre le repository User + les tokens.
    Ne contient pas d'accès SQL direct et lève des erreurs métier (core.exceptions).
    """

    def __init__(self, *, user_repo: UserRepository, jwt_settings: JWTSettings):
        self.user_repo = user_repo
        self.jwt = jwt_settings

    # ---------- Sign up ----------
    def sign_up(self, email: str, password: str, user_role: str) -> str:
        if not email or not email.strip():
            raise InvalidRequest(EMAIL_REQUIRED)

        if self.user_repo.exists_by_email(email):
            raise InvalidRequest(EMAIL_ALREADY_EXISTS)

        role = UserRole.of(user_role)
        try:
            user = self.user_repo.create(
                email=email,
                hashed_password=hash_password(password),
                role=role,
            )
        except IntegrityError:
            # inscription concurrente sur le même email
            self.user_repo.rollback()
            raise InvalidRequest(EMAIL_ALREADY_EXISTS)

        logger.info("User signed up: id=%s role=%s", user.id, user.role.value)
        return create_access_token(user_id=user.id, email=user.email, role=user.role, settings=self.jwt)

    # ---------- Sign in ----------
    def sign_in(self, email: str, password: str) -> str:
        user = self.user_repo.get_by_email(email)
        if not user:
            raise InvalidRequest(USER_NOT_REGISTERED)

        if not verify_password(password, user.hashed_password):
            logger.info("Sign-in rejected (wrong password): id=%s", user.id)
            raise AuthError(WRONG_PASSWORD)

        logger.info("User signed in: id=%s", user.id)
        return create_access_token(user_id=user.id, email=user.email, role=user.role, settings=self.jwt)
