"""
➡️ But : Définir les erreurs métier de l'application et leur traduction HTTP.

Les services lèvent ces exceptions (jamais d'HTTPException) ;
register_exception_handlers(app) les convertit en réponses JSON {"detail": ...}.

🔹 Avantages :

Services testables sans FastAPI.

Un seul endroit pour le mapping erreur -> code HTTP.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class DomainError(Exception):
    """Erreur attendue, avec un message destiné au client."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(DomainError):
    """Requête corrigeable par le client : introuvable, validation, propriété."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(DomainError):
    """Identifiants invalides (mot de passe incorrect), distinct de 'introuvable'."""
    status_code = status.HTTP_401_UNAUTHORIZED


class Unauthorized(DomainError):
    """Token absent, mal formé, invalide ou expiré."""
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(DomainError):
    """Identité valide mais rôle insuffisant."""
    status_code = status.HTTP_403_FORBIDDEN


# ---------- Token ----------

class TokenError(Exception):
    pass


class TokenInvalid(TokenError):
    pass


class TokenExpired(TokenError):
    pass


# ---------- Dépendances externes ----------

class WeatherUnavailable(Exception):
    """L'API météo n'a pas pu fournir la météo du jour."""


def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthorized):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _domain_error_handler)
