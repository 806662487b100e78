"""
Campaign Generation Service

Transforms data source rows into campaign hierarchy records:
1. Validate the generation config (before touching the database)
2. Lock the campaign set and fetch the data source rows
3. Run the regeneration guard; delete prior output when cleared
4. Group rows by interpolated campaign / ad group names
5. Build and insert campaigns, ad groups, ads and keywords per platform

Steps 2-5 run in a single transaction: either the whole hierarchy is written
or nothing is.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from adgen.core.config import settings
from adgen.core.exceptions import ConfigurationError, StorageError
from adgen.models.campaign_set import CampaignSet
from adgen.models.data_source import DataRow
from adgen.models.enums import KeywordMatchType
from adgen.schemas.campaign_sets import GenerationConfig, GenerationOptions, GenerationResult
from adgen.services.generation_writer import GenerationWriter
from adgen.services.hierarchy_builder import HierarchyBuilder
from adgen.services.regeneration_guard import RegenerationGuard
from adgen.services.row_grouping import SourceRow, build_campaign_groups

logger = logging.getLogger(__name__)


def validate_config(config: GenerationConfig) -> None:
    """Fail fast on incomplete configs; raises ConfigurationError"""
    if not config.data_source_id:
        raise ConfigurationError("dataSourceId is required")
    if not config.campaign_set_id:
        raise ConfigurationError("campaignSetId is required")
    if not config.selected_platforms:
        raise ConfigurationError("At least one platform must be selected")
    if config.hierarchy_config is None:
        raise ConfigurationError("hierarchyConfig is required")
    if config.campaign_config is None:
        raise ConfigurationError("campaignConfig is required")
    if not config.campaign_config.name_pattern:
        raise ConfigurationError("campaignConfig.namePattern is required")


def extract_generation_config(
    campaign_set_id: str,
    config: Mapping[str, Any],
    template_id: Optional[str] = None,
) -> GenerationConfig:
    """
    Build a GenerationConfig from a campaign set's stored (camelCase) config
    """
    try:
        return GenerationConfig.model_validate({
            "campaignSetId": campaign_set_id,
            "dataSourceId": config.get("dataSourceId"),
            "templateId": config.get("templateId") or template_id,
            "selectedPlatforms": config.get("selectedPlatforms") or [],
            "campaignConfig": config.get("campaignConfig"),
            "hierarchyConfig": config.get("hierarchyConfig"),
            "budgetConfig": config.get("budgetConfig"),
        })
    except ValidationError as e:
        raise ConfigurationError(f"Invalid campaign set configuration: {e}") from e


class CampaignGenerationService:
    """Service for generating campaign hierarchies from data source rows"""

    def __init__(
        self,
        session_factory: sessionmaker,
        keyword_match_type: Optional[KeywordMatchType] = None,
    ):
        self.session_factory = session_factory
        self.keyword_match_type = keyword_match_type or KeywordMatchType(
            settings.DEFAULT_KEYWORD_MATCH_TYPE
        )

    def generate_campaigns(
        self,
        config: Union[GenerationConfig, Mapping[str, Any]],
        options: Optional[Union[GenerationOptions, Mapping[str, Any]]] = None,
    ) -> GenerationResult:
        """
        Generate campaigns for a campaign set.

        Raises:
            ConfigurationError: config is incomplete (nothing was read or written)
            ConflictError: regenerate without force while campaigns are synced
            StorageError: the transaction failed and was rolled back
        """
        config = self._coerce(GenerationConfig, config)
        options = self._coerce(GenerationOptions, options or {})

        try:
            validate_config(config)
        except ConfigurationError as e:
            logger.warning(f"Invalid generation config: {e}")
            raise

        logger.info(
            f"Generating campaigns for set {config.campaign_set_id} "
            f"(regenerate={options.regenerate}, force={options.force})"
        )

        try:
            with self.session_factory.begin() as session:
                return self._generate(session, config, options)
        except SQLAlchemyError as e:
            logger.error(f"Campaign generation failed for set {config.campaign_set_id}: {e}")
            raise StorageError(f"Campaign generation failed: {e}") from e

    def _generate(
        self,
        session: Session,
        config: GenerationConfig,
        options: GenerationOptions,
    ) -> GenerationResult:
        self.lock_campaign_set(session, config.campaign_set_id)

        rows = self.fetch_rows(session, config.data_source_id)

        guard = RegenerationGuard(session)
        guard.check(config.campaign_set_id, options)

        writer = GenerationWriter(session)
        if guard.should_delete:
            writer.delete_campaign_set_output(config.campaign_set_id)

        if not rows:
            logger.info(f"Data source {config.data_source_id} has no rows, nothing to generate")
            return GenerationResult()

        groups = build_campaign_groups(
            rows,
            config.campaign_config.name_pattern,
            config.hierarchy_config.ad_groups,
        )
        batch = HierarchyBuilder(config, self.keyword_match_type).build(groups)
        campaigns = writer.write(batch)

        logger.info(
            f"Created {len(campaigns)} campaigns from {len(rows)} rows "
            f"({len(groups)} names x {len(config.selected_platforms)} platforms)"
        )
        return GenerationResult(created=len(campaigns), updated=0, campaigns=campaigns)

    # ============================================
    # Storage reads
    # ============================================

    @staticmethod
    def lock_campaign_set(session: Session, campaign_set_id: str) -> None:
        """
        Serialize concurrent runs for one campaign set (SELECT ... FOR UPDATE).
        Dialects without row locks ignore the clause.
        """
        session.execute(
            select(CampaignSet.id)
            .where(CampaignSet.id == campaign_set_id)
            .with_for_update()
        )

    @staticmethod
    def fetch_rows(session: Session, data_source_id: str) -> List[SourceRow]:
        """All rows of a data source in row order"""
        result = session.scalars(
            select(DataRow)
            .where(DataRow.data_source_id == data_source_id)
            .order_by(DataRow.row_index)
        )
        return [
            SourceRow(id=row.id, row_data=dict(row.row_data or {}), row_index=row.row_index)
            for row in result
        ]

    @staticmethod
    def _coerce(model, value):
        if isinstance(value, model):
            return value
        try:
            return model.model_validate(value)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {model.__name__}: {e}") from e
