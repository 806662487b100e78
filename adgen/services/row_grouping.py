"""
Row grouping for campaign generation

Rows are bucketed by their interpolated campaign name, then - inside each
campaign - by the interpolated name of every ad group template. Bucket order
is first-seen order, and the first row of a bucket is its anchor row: it
provides data_row_id and the values used to render the entity.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Union

from adgen.schemas.campaign_sets import AdGroupTemplate
from adgen.services.naming_service import NamingService

logger = logging.getLogger(__name__)

RowValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class SourceRow:
    """Detached copy of a data row"""
    id: str
    row_data: Mapping[str, RowValue]
    row_index: int = 0


@dataclass
class AdGroupGroup:
    name: str
    template: AdGroupTemplate
    rows: List[SourceRow] = field(default_factory=list)

    @property
    def anchor(self) -> SourceRow:
        return self.rows[0]


@dataclass
class CampaignGroup:
    name: str
    rows: List[SourceRow] = field(default_factory=list)
    ad_groups: List[AdGroupGroup] = field(default_factory=list)

    @property
    def anchor(self) -> SourceRow:
        return self.rows[0]


def group_rows_by_campaign_name(
    rows: Sequence[SourceRow],
    name_pattern: str,
) -> List[CampaignGroup]:
    """
    Bucket rows by trimmed campaign name.

    Rows whose name is empty or whitespace-only are dropped entirely.
    """
    groups: Dict[str, CampaignGroup] = {}
    skipped = 0

    for row in rows:
        campaign_name = NamingService.campaign_name(name_pattern, row.row_data)
        if not campaign_name:
            skipped += 1
            continue

        group = groups.get(campaign_name)
        if group is None:
            group = CampaignGroup(name=campaign_name)
            groups[campaign_name] = group
        group.rows.append(row)

    if skipped:
        logger.info(f"Skipped {skipped} rows with empty campaign names")

    return list(groups.values())


def group_rows_by_ad_group_name(
    rows: Sequence[SourceRow],
    template: AdGroupTemplate,
) -> List[AdGroupGroup]:
    """Bucket one campaign's rows by the template's interpolated ad group name"""
    groups: Dict[str, AdGroupGroup] = {}

    for row in rows:
        ad_group_name = NamingService.ad_group_name(template.name_pattern, row.row_data)
        group = groups.get(ad_group_name)
        if group is None:
            group = AdGroupGroup(name=ad_group_name, template=template)
            groups[ad_group_name] = group
        group.rows.append(row)

    return list(groups.values())


def build_campaign_groups(
    rows: Sequence[SourceRow],
    name_pattern: str,
    ad_group_templates: Optional[Sequence[AdGroupTemplate]] = None,
) -> List[CampaignGroup]:
    """Campaign buckets with their nested ad group buckets filled in"""
    campaign_groups = group_rows_by_campaign_name(rows, name_pattern)

    for campaign_group in campaign_groups:
        for template in ad_group_templates or []:
            campaign_group.ad_groups.extend(
                group_rows_by_ad_group_name(campaign_group.rows, template)
            )

    return campaign_groups
