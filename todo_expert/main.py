"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

gestionnaires d'erreurs métier (InvalidRequest, AuthError, Unauthorized, Forbidden)

schéma OpenAPI personnalisé

Inclut les routers (ex : /api/v1/todos).

Initialise la base et les logs au démarrage (@app.on_event("startup")).

Point unique d’exécution : uvicorn todo_expert.main:app --reload.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from todo_expert.core.config import settings
from todo_expert.core.exceptions import register_exception_handlers
from todo_expert.core.logging import configure_logging
from todo_expert.core.openapi import custom_openapi
from todo_expert.db.session import init_db

from todo_expert.api.v1.routers import authentication, users, todos, managers, comments, admin

import uvicorn

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "auth", "description": "Inscription / connexion (JWT)"},
        {"name": "users", "description": "Profil et mot de passe"},
        {"name": "todos", "description": "Todos avec la météo du jour"},
        {"name": "managers", "description": "Managers associés à un todo"},
        {"name": "comments", "description": "Commentaires d'un todo"},
        {"name": "admin", "description": "Opérations réservées aux ADMIN (journalisées)"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(authentication.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(todos.router, prefix="/api/v1")
app.include_router(managers.router, prefix="/api/v1")
app.include_router(comments.router, prefix="/api/v1")
app.include_router(admin.router, prefix="/api/v1")

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    configure_logging(settings.LOG_LEVEL)
    init_db()

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8080) # http://localhost:8080
