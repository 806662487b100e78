"""
API v1 routes
"""
from fastapi import APIRouter

from adgen.api.v1 import health, campaign_sets

api_router = APIRouter(prefix="/api/v1")

# Include routers
api_router.include_router(health.router)
api_router.include_router(campaign_sets.router)
