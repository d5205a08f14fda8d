"""Aggregate all API routers."""

from fastapi import APIRouter

from . import match, system

api_router = APIRouter()
api_router.include_router(match.router)
api_router.include_router(system.router)
