"""
Dependency injection for FastAPI
"""
from typing import Generator

from adgen.core.database import SessionLocal
from adgen.services.campaign_generation import CampaignGenerationService


def get_db() -> Generator:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_generation_service() -> CampaignGenerationService:
    """Generation service; opens its own transaction per call"""
    return CampaignGenerationService(SessionLocal)
