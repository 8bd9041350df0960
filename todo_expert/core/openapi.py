"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec les conventions de l'API.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API Todo : comptes, todos (avec météo), managers, commentaires, administration.\n\n"
            "### Conventions\n"
            "- Authentification : en-tête `Authorization: Bearer <token>`.\n"
            "- Toutes les heures sont en UTC.\n"
            "- Pagination : query params `page` (à partir de 1) & `size`.\n"
            "- Erreurs : `{\"detail\": \"...\"}` : 400 requête invalide, 401 authentification, 403 rôle.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
