from todo_expert.core.exceptions import Forbidden
from todo_expert.db.models.users import UserRole
from todo_expert.security.identity import AuthIdentity

# Rôles satisfaisant chaque exigence
_GRANTS = {
    UserRole.USER: {UserRole.USER, UserRole.ADMIN},
    UserRole.ADMIN: {UserRole.ADMIN},
}


def has_role(identity: AuthIdentity, required: UserRole) -> bool:
    return identity.role in _GRANTS[required]


def require_role(identity: AuthIdentity, required: UserRole) -> None:
    if not has_role(identity, required):
        raise Forbidden("관리자 권한이 없습니다.")
