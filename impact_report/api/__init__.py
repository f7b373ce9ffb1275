"""API router."""
from fastapi import APIRouter
from .endpoints import authentication, impact, uploads

router = APIRouter()

router.include_router(authentication.router, prefix="/auth", tags=["authentication"])
router.include_router(impact.router)
router.include_router(uploads.router)
