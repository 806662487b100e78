"""
Hierarchy builder - expands campaign groups into insert-ready records

Database ids are not known while building, so children point at their parent
through its position in the batch (``campaign_ref`` / ``ad_group_ref``). The
writer inserts one level at a time and swaps the refs for real ids.

Per (platform, campaign group):
    1 campaign
    per ad group bucket: 1 ad group
        1 keyword per keyword pattern (no dedup between patterns)
        1 ad per ad template
All text is rendered from the bucket's anchor row.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from adgen.models.enums import (
    Platform, BudgetType, CampaignStatus, AdGroupStatus, AdStatus,
    KeywordStatus, KeywordMatchType,
)
from adgen.schemas.campaign_sets import GenerationConfig, BudgetConfig
from adgen.services.naming_service import NamingService, interpolate_pattern
from adgen.services.row_grouping import CampaignGroup, AdGroupGroup

LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_budget_amount(amount_pattern: str, row_data: Mapping[str, Any]) -> float:
    """Interpolate and read the leading number; anything unparseable is 0"""
    interpolated = interpolate_pattern(amount_pattern, row_data)
    match = LEADING_NUMBER.match(interpolated)
    if not match:
        return 0.0
    return float(match.group(0))


@dataclass
class StagedCampaign:
    values: Dict[str, Any]


@dataclass
class StagedAdGroup:
    campaign_ref: int
    values: Dict[str, Any]


@dataclass
class StagedAd:
    ad_group_ref: int
    values: Dict[str, Any]


@dataclass
class StagedKeyword:
    ad_group_ref: int
    values: Dict[str, Any]


@dataclass
class HierarchyBatch:
    campaigns: List[StagedCampaign] = field(default_factory=list)
    ad_groups: List[StagedAdGroup] = field(default_factory=list)
    ads: List[StagedAd] = field(default_factory=list)
    keywords: List[StagedKeyword] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.campaigns


class HierarchyBuilder:
    """Turns grouped rows into a HierarchyBatch for one generation config"""

    def __init__(
        self,
        config: GenerationConfig,
        keyword_match_type: KeywordMatchType = KeywordMatchType.BROAD,
    ):
        self.config = config
        self.keyword_match_type = keyword_match_type

    def build(
        self,
        groups: Sequence[CampaignGroup],
        platforms: Optional[Sequence[Platform]] = None,
    ) -> HierarchyBatch:
        batch = HierarchyBatch()
        for platform in platforms if platforms is not None else self.config.selected_platforms:
            for order_index, group in enumerate(groups):
                self._add_campaign(batch, group, Platform(platform), order_index)
        return batch

    # ============================================
    # Levels
    # ============================================

    def _add_campaign(
        self,
        batch: HierarchyBatch,
        group: CampaignGroup,
        platform: Platform,
        order_index: int,
    ) -> None:
        anchor = group.anchor
        batch.campaigns.append(StagedCampaign(values={
            "campaign_set_id": self.config.campaign_set_id,
            "template_id": self.config.template_id or None,
            "data_row_id": anchor.id,
            "name": group.name,
            "platform": platform,
            "campaign_data": self._campaign_data(group, platform),
            "status": CampaignStatus.DRAFT,
            "order_index": order_index,
        }))
        campaign_ref = len(batch.campaigns) - 1

        for ad_group_index, ad_group in enumerate(group.ad_groups):
            self._add_ad_group(batch, campaign_ref, ad_group, ad_group_index)

    def _add_ad_group(
        self,
        batch: HierarchyBatch,
        campaign_ref: int,
        group: AdGroupGroup,
        order_index: int,
    ) -> None:
        batch.ad_groups.append(StagedAdGroup(campaign_ref=campaign_ref, values={
            "name": group.name,
            "status": AdGroupStatus.ACTIVE,
            "order_index": order_index,
        }))
        ad_group_ref = len(batch.ad_groups) - 1
        row_data = group.anchor.row_data

        for ad_index, ad in enumerate(group.template.ads):
            batch.ads.append(StagedAd(ad_group_ref=ad_group_ref, values={
                "headline": NamingService.optional_text(ad.headline, row_data),
                "description": NamingService.optional_text(ad.description, row_data),
                "display_url": NamingService.optional_text(ad.display_url, row_data),
                "final_url": NamingService.optional_text(ad.final_url, row_data),
                "call_to_action": NamingService.optional_text(ad.call_to_action, row_data),
                "status": AdStatus.ACTIVE,
                "order_index": ad_index,
            }))

        for pattern in group.template.keywords:
            keyword = NamingService.keyword_text(pattern, row_data)
            if not keyword:
                continue
            batch.keywords.append(StagedKeyword(ad_group_ref=ad_group_ref, values={
                "keyword": keyword,
                "match_type": self.keyword_match_type,
                "status": KeywordStatus.ACTIVE,
            }))

    # ============================================
    # Campaign payload
    # ============================================

    def _campaign_data(self, group: CampaignGroup, platform: Platform) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": group.name,
            "platform": platform.value,
            "objective": self.config.campaign_config.objective if self.config.campaign_config else None,
        }
        if self.config.budget_config:
            data["budget"] = self._budget(self.config.budget_config, group.anchor.row_data)
        return data

    @staticmethod
    def _budget(budget: BudgetConfig, row_data: Mapping[str, Any]) -> Dict[str, Any]:
        # Storage only knows daily / lifetime
        budget_type = BudgetType.DAILY if budget.type == BudgetType.SHARED else budget.type
        return {
            "type": budget_type.value,
            "amount": parse_budget_amount(budget.amount_pattern, row_data),
            "currency": budget.currency,
        }
