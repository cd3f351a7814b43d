"""Main API router: mounts JSON sub-routers under /api."""

from fastapi import APIRouter

from src.api.info import router as info_router

api_router = APIRouter(prefix="/api")
api_router.include_router(info_router)
