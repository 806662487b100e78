"""
Schemas for campaign generation

Config models accept both snake_case and the camelCase keys stored by the
campaign-set wizard (``namePattern``, ``hierarchyConfig`` ...). Required
fields are optional at the schema level so that the generation service can
report a precise ConfigurationError instead of a generic validation error.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from adgen.models.enums import (
    Platform, BudgetType, CampaignStatus, AdGroupStatus, AdStatus,
    KeywordStatus, KeywordMatchType,
)


class CamelModel(BaseModel):
    """Accept camelCase or snake_case keys"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ============================================
# Generation config
# ============================================

class AdTemplate(CamelModel):
    """Ad copy patterns; every field may contain {variable} tokens"""
    id: Optional[str] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    display_url: Optional[str] = None
    final_url: Optional[str] = None
    call_to_action: Optional[str] = None


class AdGroupTemplate(CamelModel):
    id: Optional[str] = None
    name_pattern: str = ""
    keywords: List[str] = Field(default_factory=list)
    ads: List[AdTemplate] = Field(default_factory=list)


class HierarchyConfig(CamelModel):
    ad_groups: List[AdGroupTemplate] = Field(default_factory=list)


class CampaignConfig(CamelModel):
    name_pattern: Optional[str] = None
    objective: Optional[str] = None


class BudgetConfig(CamelModel):
    type: BudgetType = BudgetType.DAILY
    amount_pattern: str = "0"
    currency: str = "USD"


class GenerationConfig(CamelModel):
    """Everything needed to expand a data source into a campaign hierarchy"""
    campaign_set_id: Optional[str] = None
    data_source_id: Optional[str] = None
    template_id: Optional[str] = None
    selected_platforms: List[Platform] = Field(default_factory=list)
    campaign_config: Optional[CampaignConfig] = None
    hierarchy_config: Optional[HierarchyConfig] = None
    budget_config: Optional[BudgetConfig] = None


class GenerationOptions(CamelModel):
    """regenerate: replace prior output; force: skip the sync-safety check"""
    regenerate: bool = False
    force: bool = False


# ============================================
# Results
# ============================================

class GeneratedCampaignSummary(BaseModel):
    id: str
    name: str
    platform: Platform


class GenerationResult(BaseModel):
    """Outcome of one generation run - created counts campaigns only"""
    created: int = 0
    updated: int = 0
    campaigns: List[GeneratedCampaignSummary] = []


# ============================================
# API
# ============================================

class GenerateCampaignsRequest(CamelModel):
    regenerate: bool = False
    force: bool = False


class KeywordResponse(BaseModel):
    id: str
    keyword: str
    match_type: KeywordMatchType
    status: KeywordStatus

    class Config:
        from_attributes = True


class AdResponse(BaseModel):
    id: str
    headline: Optional[str] = None
    description: Optional[str] = None
    display_url: Optional[str] = None
    final_url: Optional[str] = None
    call_to_action: Optional[str] = None
    status: AdStatus
    order_index: int = 0

    class Config:
        from_attributes = True


class AdGroupResponse(BaseModel):
    id: str
    name: str
    status: AdGroupStatus
    order_index: int = 0
    ads: List[AdResponse] = []
    keywords: List[KeywordResponse] = []

    class Config:
        from_attributes = True


class CampaignResponse(BaseModel):
    id: str
    campaign_set_id: Optional[str] = None
    template_id: Optional[str] = None
    data_row_id: Optional[str] = None
    name: str
    platform: Platform
    platform_campaign_id: Optional[str] = None
    campaign_data: Dict[str, Any] = {}
    status: CampaignStatus
    order_index: int = 0
    created_at: Optional[datetime] = None
    ad_groups: List[AdGroupResponse] = []

    class Config:
        from_attributes = True


class GenerateCampaignsResponse(BaseModel):
    campaigns: List[CampaignResponse] = []
    created: int = 0
    updated: int = 0
