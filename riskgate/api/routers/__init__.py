"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from riskgate.api.routers.classify import router as classify_router
from riskgate.api.routers.health import router as health_router
from riskgate.api.routers.presets import router as presets_router
from riskgate.api.routers.sessions import router as sessions_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(classify_router, prefix="/classify", tags=["classify"])
api_router.include_router(presets_router, prefix="/presets", tags=["presets"])
api_router.include_router(sessions_router, prefix="/sessions", tags=["sessions"])
