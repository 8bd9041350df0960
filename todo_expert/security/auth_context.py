"""
➡️ But : Transformer l'en-tête Authorization brut en identité vérifiée (AuthIdentity).

Le préfixe "Bearer " (7 caractères) est retiré avant le décodage.
Toute erreur de token est remontée en Unauthorized.
"""

from typing import Optional

from todo_expert.core.exceptions import TokenExpired, TokenInvalid, Unauthorized
from todo_expert.security.identity import AuthIdentity
from todo_expert.security.tokens import JWTSettings, decode_token

BEARER_PREFIX = "Bearer "


def resolve_identity(authorization: Optional[str], settings: JWTSettings) -> AuthIdentity:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthorized("JWT 토큰이 필요합니다.")

    token = authorization[len(BEARER_PREFIX):]
    if not token.strip():
        raise Unauthorized("JWT 토큰이 필요합니다.")

    try:
        return decode_token(token, settings)
    except TokenExpired as e:
        raise Unauthorized("만료된 JWT 토큰입니다.") from e
    except TokenInvalid as e:
        raise Unauthorized("유효하지 않은 JWT 토큰입니다.") from e
