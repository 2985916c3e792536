from fastapi import APIRouter, Depends

from tripbook.core.config import Settings
from tripbook.models import CategoryOptions
from tripbook.routers.deps import get_app_settings

router = APIRouter(tags=["meta"])


@router.get("/health", summary="Liveness probe")
async def health():
    return {"status": "ok"}


@router.get("/categories", response_model=CategoryOptions, summary="Trip categories")
async def list_categories(settings: Settings = Depends(get_app_settings)):
    return CategoryOptions(
        categories=list(settings.categories),
        unselected=settings.unselected_category,
        default=settings.default_category,
    )
