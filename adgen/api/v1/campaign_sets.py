"""
Campaign set generation endpoints
- Generate (or regenerate) the campaign hierarchy of a campaign set
- Read back the generated hierarchy
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from adgen.core.deps import get_db, get_generation_service
from adgen.models import CampaignSet, DataSource, GeneratedCampaign, AdGroup
from adgen.schemas.campaign_sets import (
    GenerateCampaignsRequest,
    GenerateCampaignsResponse,
    GenerationOptions,
    CampaignResponse,
)
from adgen.services.campaign_generation import CampaignGenerationService, extract_generation_config


router = APIRouter(prefix="/campaign-sets", tags=["Campaign Sets"])

# ============================================
# Helpers
# ============================================


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _get_campaign_set_or_404(db: Session, set_id: str) -> CampaignSet:
    """Return campaign set or raise 404."""
    campaign_set = db.get(CampaignSet, set_id)
    if not campaign_set:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Campaign set not found",
        )
    return campaign_set


def _require_generation_config(campaign_set: CampaignSet) -> Dict[str, Any]:
    """The stored wizard config must be complete before generation"""
    config = campaign_set.config
    if not config:
        raise _bad_request("Campaign set has no configuration")

    if not config.get("dataSourceId"):
        raise _bad_request("Campaign set has no data source configured")

    if not config.get("selectedPlatforms"):
        raise _bad_request("Campaign set has no platforms selected")

    campaign_config = config.get("campaignConfig") or {}
    if not campaign_config.get("namePattern"):
        raise _bad_request("Campaign set has no campaign name pattern configured")

    hierarchy_config = config.get("hierarchyConfig") or {}
    if not hierarchy_config.get("adGroups"):
        raise _bad_request("Campaign set has no hierarchy configuration")

    return config


def _load_campaign_hierarchy(db: Session, set_id: str) -> List[GeneratedCampaign]:
    stmt = (
        select(GeneratedCampaign)
        .where(GeneratedCampaign.campaign_set_id == set_id)
        .options(
            selectinload(GeneratedCampaign.ad_groups).selectinload(AdGroup.ads),
            selectinload(GeneratedCampaign.ad_groups).selectinload(AdGroup.keywords),
            selectinload(GeneratedCampaign.sync_records),
        )
        .order_by(GeneratedCampaign.order_index, GeneratedCampaign.platform)
    )
    return list(db.scalars(stmt).all())


# ============================================
# Endpoints
# ============================================

@router.post("/{set_id}/generate", response_model=GenerateCampaignsResponse)
def generate_campaigns(
    set_id: str,
    body: GenerateCampaignsRequest = GenerateCampaignsRequest(),
    db: Session = Depends(get_db),
    service: CampaignGenerationService = Depends(get_generation_service),
):
    """
    Expand the campaign set's data source into campaigns / ad groups / ads / keywords

    With ``regenerate`` the previous output is replaced; this is refused (409)
    when campaigns were already synced unless ``force`` is set.
    """
    campaign_set = _get_campaign_set_or_404(db, set_id)
    config = _require_generation_config(campaign_set)

    data_source = db.get(DataSource, config["dataSourceId"])
    # Same message for foreign teams so existence does not leak
    if not data_source or (
        data_source.team_id is not None and data_source.team_id != campaign_set.team_id
    ):
        raise _bad_request("Data source not found")

    generation_config = extract_generation_config(set_id, config, campaign_set.template_id)
    result = service.generate_campaigns(
        generation_config,
        GenerationOptions(regenerate=body.regenerate, force=body.force),
    )

    db.expire_all()
    campaigns = _load_campaign_hierarchy(db, set_id)

    return GenerateCampaignsResponse(
        campaigns=[CampaignResponse.model_validate(c) for c in campaigns],
        created=result.created,
        updated=result.updated,
    )


@router.get("/{set_id}/campaigns", response_model=List[CampaignResponse])
def list_generated_campaigns(
    set_id: str,
    db: Session = Depends(get_db),
):
    """Generated hierarchy of a campaign set ordered by generation order"""
    _get_campaign_set_or_404(db, set_id)
    return [CampaignResponse.model_validate(c) for c in _load_campaign_hierarchy(db, set_id)]
