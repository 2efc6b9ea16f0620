from fastapi import APIRouter, Depends

from studio.core.db import Stores, get_stores

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(stores: Stores = Depends(get_stores)):
    """Проверка работоспособности сервиса"""
    return {
        "status": "ok",
        "stores": {
            "projects": str(stores.projects.path),
            "templates": str(stores.templates.path),
            "commits": str(stores.commits.path)
        }
    }
