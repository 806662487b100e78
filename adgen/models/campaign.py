"""
GeneratedCampaign, AdGroup, Ad, Keyword, SyncRecord models

One generation run writes the campaign -> ad group -> ad/keyword tree for a
campaign set. SyncRecord is written later by the platform sync process.
"""
from typing import Optional

from sqlalchemy import Column, Integer, String, Enum, Text, DateTime, JSON, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from adgen.models.base import BaseModel
from adgen.models.enums import (
    Platform,
    CampaignStatus,
    AdGroupStatus,
    AdStatus,
    KeywordStatus,
    KeywordMatchType,
    SyncStatus,
)


def enum_values(enum_cls):
    """Persist enum values ("google-sheets") rather than member names"""
    return [member.value for member in enum_cls]


class GeneratedCampaign(BaseModel):
    """Campaign produced by the generation engine - one per (platform, name)"""

    __tablename__ = "generated_campaigns"

    # ============================================
    # Ownership & Provenance
    # ============================================
    campaign_set_id = Column(String(36), ForeignKey("campaign_sets.id"), nullable=True, index=True)
    template_id = Column(String(36), nullable=True)
    data_row_id = Column(String(36), ForeignKey("data_rows.id"), nullable=True)

    # ============================================
    # Campaign Info
    # ============================================
    name = Column(String(255), nullable=False)
    platform = Column(Enum(Platform, name="platform", values_callable=enum_values), nullable=False, index=True)
    # name, platform, objective, budget as produced from the config
    campaign_data = Column(JSON, nullable=False)
    status = Column(
        Enum(CampaignStatus, name="campaign_status", values_callable=enum_values),
        default=CampaignStatus.DRAFT,
        nullable=False,
    )
    order_index = Column(Integer, default=0, nullable=False)

    # ============================================
    # Relationships
    # ============================================
    campaign_set = relationship("CampaignSet", back_populates="campaigns")
    data_row = relationship("DataRow")
    ad_groups = relationship("AdGroup", back_populates="campaign", order_by="AdGroup.order_index")
    sync_records = relationship("SyncRecord", back_populates="campaign")

    @property
    def platform_campaign_id(self) -> Optional[str]:
        """External campaign id once synced, else None"""
        for record in self.sync_records:
            if record.platform_id:
                return record.platform_id
        return None


class AdGroup(BaseModel):
    """Ad group - Reddit ad group / Google ad group / Facebook ad set"""

    __tablename__ = "ad_groups"

    campaign_id = Column(String(36), ForeignKey("generated_campaigns.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    settings = Column(JSON, nullable=True)
    platform_ad_group_id = Column(String(255), nullable=True)
    status = Column(
        Enum(AdGroupStatus, name="ad_group_status", values_callable=enum_values),
        default=AdGroupStatus.ACTIVE,
        nullable=False,
    )
    order_index = Column(Integer, default=0, nullable=False)

    campaign = relationship("GeneratedCampaign", back_populates="ad_groups")
    ads = relationship("Ad", back_populates="ad_group", order_by="Ad.order_index")
    keywords = relationship("Keyword", back_populates="ad_group")


class Ad(BaseModel):
    """Individual ad rendered from an ad template"""

    __tablename__ = "ads"

    ad_group_id = Column(String(36), ForeignKey("ad_groups.id"), nullable=False, index=True)

    # ============================================
    # Copy
    # ============================================
    headline = Column(String(300), nullable=True)
    description = Column(Text, nullable=True)
    display_url = Column(String(255), nullable=True)
    final_url = Column(Text, nullable=True)
    call_to_action = Column(String(50), nullable=True)
    assets = Column(JSON, nullable=True)

    platform_ad_id = Column(String(255), nullable=True)
    status = Column(
        Enum(AdStatus, name="ad_status", values_callable=enum_values),
        default=AdStatus.ACTIVE,
        nullable=False,
    )
    order_index = Column(Integer, default=0, nullable=False)

    ad_group = relationship("AdGroup", back_populates="ads")


class Keyword(BaseModel):
    """Keyword attached to an ad group"""

    __tablename__ = "keywords"

    ad_group_id = Column(String(36), ForeignKey("ad_groups.id"), nullable=False, index=True)
    keyword = Column(String(255), nullable=False)
    match_type = Column(
        Enum(KeywordMatchType, name="keyword_match_type", values_callable=enum_values),
        default=KeywordMatchType.BROAD,
        nullable=False,
    )
    bid = Column(Numeric(10, 2), nullable=True)
    platform_keyword_id = Column(String(255), nullable=True)
    status = Column(
        Enum(KeywordStatus, name="keyword_status", values_callable=enum_values),
        default=KeywordStatus.ACTIVE,
        nullable=False,
    )

    ad_group = relationship("AdGroup", back_populates="keywords")


class SyncRecord(BaseModel):
    """Outcome of pushing a generated campaign to an ad platform"""

    __tablename__ = "sync_records"

    generated_campaign_id = Column(String(36), ForeignKey("generated_campaigns.id"), nullable=False, index=True)
    platform = Column(Enum(Platform, name="platform", values_callable=enum_values), nullable=False)
    # External id assigned by the platform; set means "synced"
    platform_id = Column(String(255), nullable=True)
    sync_status = Column(
        Enum(SyncStatus, name="sync_status", values_callable=enum_values),
        default=SyncStatus.PENDING,
        nullable=False,
    )
    last_synced_at = Column(DateTime(timezone=True), nullable=True)
    error_log = Column(Text, nullable=True)
    retry_count = Column(Integer, default=0, nullable=False)

    campaign = relationship("GeneratedCampaign", back_populates="sync_records")
