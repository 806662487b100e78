"""
Writes a HierarchyBatch inside the caller's transaction

Insert phases run in parent-to-child order so every foreign key is known
before the child rows are sent:
    campaigns (RETURNING id) -> ad groups (RETURNING id) -> ads + keywords
"""

import logging
from typing import Any, Dict, List, Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from adgen.models.campaign import GeneratedCampaign, AdGroup, Ad, Keyword, SyncRecord
from adgen.schemas.campaign_sets import GeneratedCampaignSummary
from adgen.services.hierarchy_builder import HierarchyBatch

logger = logging.getLogger(__name__)


class GenerationWriter:
    """Persists generated hierarchies; never commits - the caller owns the transaction"""

    def __init__(self, session: Session):
        self.session = session

    # ============================================
    # Delete (regeneration)
    # ============================================

    def delete_campaign_set_output(self, campaign_set_id: str) -> int:
        """Remove everything previously generated for the set, children first"""
        campaign_ids = select(GeneratedCampaign.id).where(
            GeneratedCampaign.campaign_set_id == campaign_set_id
        )
        ad_group_ids = select(AdGroup.id).where(AdGroup.campaign_id.in_(campaign_ids))

        for stmt in (
            delete(Keyword).where(Keyword.ad_group_id.in_(ad_group_ids)),
            delete(Ad).where(Ad.ad_group_id.in_(ad_group_ids)),
            delete(AdGroup).where(AdGroup.campaign_id.in_(campaign_ids)),
            delete(SyncRecord).where(SyncRecord.generated_campaign_id.in_(campaign_ids)),
        ):
            self.session.execute(stmt.execution_options(synchronize_session=False))

        result = self.session.execute(
            delete(GeneratedCampaign)
            .where(GeneratedCampaign.campaign_set_id == campaign_set_id)
            .execution_options(synchronize_session=False)
        )
        deleted = result.rowcount or 0
        logger.info(f"Deleted {deleted} campaigns from campaign set {campaign_set_id}")
        return deleted

    # ============================================
    # Insert
    # ============================================

    def _insert_returning_ids(self, model, rows: List[Dict[str, Any]]) -> List[str]:
        if not rows:
            return []
        stmt = insert(model).returning(model.id, sort_by_parameter_order=True)
        return list(self.session.scalars(stmt, rows).all())

    def _insert(self, model, rows: List[Dict[str, Any]]) -> None:
        if rows:
            self.session.execute(insert(model), rows)

    def write(self, batch: HierarchyBatch) -> List[GeneratedCampaignSummary]:
        """Insert all levels of the batch; returns the created campaigns in order"""
        campaign_ids = self._insert_returning_ids(
            GeneratedCampaign, [staged.values for staged in batch.campaigns]
        )

        ad_group_ids = self._insert_returning_ids(AdGroup, [
            {**staged.values, "campaign_id": campaign_ids[staged.campaign_ref]}
            for staged in batch.ad_groups
        ])

        self._insert(Ad, [
            {**staged.values, "ad_group_id": ad_group_ids[staged.ad_group_ref]}
            for staged in batch.ads
        ])
        self._insert(Keyword, [
            {**staged.values, "ad_group_id": ad_group_ids[staged.ad_group_ref]}
            for staged in batch.keywords
        ])

        logger.info(
            f"Inserted {len(campaign_ids)} campaigns, {len(ad_group_ids)} ad groups, "
            f"{len(batch.ads)} ads, {len(batch.keywords)} keywords"
        )

        return summarize(batch, campaign_ids)


def summarize(batch: HierarchyBatch, campaign_ids: Sequence[str]) -> List[GeneratedCampaignSummary]:
    return [
        GeneratedCampaignSummary(
            id=campaign_id,
            name=staged.values["name"],
            platform=staged.values["platform"],
        )
        for staged, campaign_id in zip(batch.campaigns, campaign_ids)
    ]
