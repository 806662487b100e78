"""
CampaignSet model - scope of one generation run and of sync-conflict checks
"""
from sqlalchemy import Column, String, Enum, Text, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship

from adgen.models.base import BaseModel
from adgen.models.campaign import enum_values
from adgen.models.enums import CampaignSetStatus, SyncStatus


class CampaignSet(BaseModel):
    """User-defined unit of work holding the generation config"""

    __tablename__ = "campaign_sets"

    team_id = Column(String(36), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    data_source_id = Column(String(36), ForeignKey("data_sources.id"), nullable=True)
    template_id = Column(String(36), nullable=True)

    # Wizard output: dataSourceId, selectedPlatforms, campaignConfig,
    # hierarchyConfig, budgetConfig (camelCase keys)
    config = Column(JSON, nullable=True)

    status = Column(
        Enum(CampaignSetStatus, name="campaign_set_status", values_callable=enum_values),
        default=CampaignSetStatus.DRAFT,
        nullable=False,
    )
    sync_status = Column(
        Enum(SyncStatus, name="campaign_set_sync_status", values_callable=enum_values),
        default=SyncStatus.PENDING,
        nullable=False,
    )
    last_synced_at = Column(DateTime(timezone=True), nullable=True)

    data_source = relationship("DataSource")
    campaigns = relationship(
        "GeneratedCampaign",
        back_populates="campaign_set",
        order_by="GeneratedCampaign.order_index",
    )
