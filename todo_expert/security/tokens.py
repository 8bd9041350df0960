from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TypedDict

from jose import jwt, JWTError, ExpiredSignatureError

from todo_expert.core.exceptions import TokenExpired, TokenInvalid
from todo_expert.db.models.users import UserRole
from todo_expert.security.identity import AuthIdentity

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT.

    - `secret` : clé secrète pour signer/valider les tokens
    - `issuer` : émetteur (utilisé dans le payload et vérifié au décodage)
    - `algorithm` : algo de signature (HS256 recommandé)
    - `access_ttl` : durée de vie d’un token, fixée à l'émission
    """
    secret: str
    issuer: str = "todo-expert"
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(minutes=60)


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # identifiant utilisateur (décimal)
    email: str
    role: str           # "USER" | "ADMIN"
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)


# ==========================================================
# 🎟️ Génération
# ==========================================================

def create_access_token(*, user_id: int, email: str, role: UserRole, settings: JWTSettings) -> str:
    """
    Crée un token JWT signé, valable `settings.access_ttl`.
    """
    now = _now()
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": str(user_id),
        "email": email,
        "role": UserRole(role).value,
        "iat": int(now.timestamp()),
        "exp": int((now + settings.access_ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings) -> AuthIdentity:
    """
    Décode et valide un token JWT (signature + expiration + émetteur).
    Lève TokenExpired si le token est expiré, TokenInvalid dans tous les autres cas.
    """
    try:
        decoded: DecodedToken = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            issuer=settings.issuer,
            options={"verify_aud": False},
        )
    except ExpiredSignatureError as e:
        raise TokenExpired("Token expired") from e
    except JWTError as e:
        raise TokenInvalid("Invalid token") from e

    sub = decoded.get("sub")
    email = decoded.get("email")
    role = decoded.get("role")
    if not sub or not sub.isdigit() or not email or not role:
        raise TokenInvalid("Invalid token claims")

    try:
        user_role = UserRole(role)
    except ValueError as e:
        raise TokenInvalid("Invalid token role") from e

    return AuthIdentity(id=int(sub), email=email, role=user_role)
