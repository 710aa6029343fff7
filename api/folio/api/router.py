"""API router composition for all route groups."""

from fastapi import APIRouter

from .routes import ops

api_router = APIRouter()
api_router.include_router(ops.router, prefix="/ops", tags=["ops"])
