"""
Database models for adgen
"""
from adgen.models.base import Base, BaseModel, TimestampMixin
from adgen.models.enums import (
    Platform, DataSourceType, CampaignSetStatus, SyncStatus, CampaignStatus,
    AdGroupStatus, AdStatus, KeywordStatus, KeywordMatchType, BudgetType
)

# Campaign hierarchy models
from adgen.models.campaign import GeneratedCampaign, AdGroup, Ad, Keyword, SyncRecord

# Data source models
from adgen.models.data_source import DataSource, DataRow

# Campaign set models
from adgen.models.campaign_set import CampaignSet


__all__ = [
    # Base
    "Base", "BaseModel", "TimestampMixin",

    # Enums
    "Platform", "DataSourceType", "CampaignSetStatus", "SyncStatus",
    "CampaignStatus", "AdGroupStatus", "AdStatus", "KeywordStatus",
    "KeywordMatchType", "BudgetType",

    # Campaign hierarchy
    "GeneratedCampaign", "AdGroup", "Ad", "Keyword", "SyncRecord",

    # Data source
    "DataSource", "DataRow",

    # Campaign set
    "CampaignSet",
]
