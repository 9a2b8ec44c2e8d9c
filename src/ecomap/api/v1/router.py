"""Main v1 API router combining all endpoints."""

from fastapi import APIRouter

from . import challenge, ecoscore

router = APIRouter(prefix="/v1")

# Include all endpoint routers
router.include_router(ecoscore.router)
router.include_router(challenge.router)
