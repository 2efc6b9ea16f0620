from studio.api.http.health import router as health_router
from studio.api.http.projects import router as projects_router
from studio.api.http.commits import router as commits_router
from studio.api.http.templates import router as templates_router

__all__ = [
    "health_router",
    "projects_router",
    "commits_router",
    "templates_router"
]
