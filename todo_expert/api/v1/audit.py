"""
➡️ But : Journaliser les accès aux routes d'administration.

admin_access_log(operation) décore une route qui reçoit `request` et `identity` :
- écrit une ligne d'audit (id utilisateur, horodatage, URL, opération, décision),
- applique la policy ADMIN (Forbidden sinon),
- puis appelle la route.
"""

import logging
from datetime import datetime, timezone
from functools import wraps

from fastapi import Request

from todo_expert.core.exceptions import Forbidden
from todo_expert.db.models.users import UserRole
from todo_expert.security.access import require_role
from todo_expert.security.identity import AuthIdentity

audit_logger = logging.getLogger("todo_expert.audit")


def admin_access_log(operation: str):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            request: Request = kwargs["request"]
            identity: AuthIdentity = kwargs["identity"]
            requested_at = datetime.now(timezone.utc).isoformat()

            try:
                require_role(identity, UserRole.ADMIN)
            except Forbidden:
                audit_logger.warning(
                    "user_id=%s requested_at=%s url=%s operation=%s decision=denied",
                    identity.id, requested_at, request.url.path, operation,
                )
                raise

            audit_logger.info(
                "user_id=%s requested_at=%s url=%s operation=%s decision=granted",
                identity.id, requested_at, request.url.path, operation,
            )
            return func(*args, **kwargs)

        return wrapper

    return decorator
