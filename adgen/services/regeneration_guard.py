"""
Regeneration guard - protects campaigns that were already pushed to a platform

    regenerate=False              NOT_REQUESTED -> SKIP_CHECK
    regenerate=True, force=True   REQUESTED -> CLEARED        (no query issued)
    regenerate=True, force=False  REQUESTED -> CHECK_SYNC -> CLEARED | BLOCKED

BLOCKED raises ConflictError before anything is deleted or inserted.
"""

import enum
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from adgen.core.exceptions import ConflictError
from adgen.models.campaign import GeneratedCampaign, SyncRecord
from adgen.schemas.campaign_sets import GenerationOptions

logger = logging.getLogger(__name__)

SYNCED_CONFLICT_MESSAGE = (
    "Cannot regenerate: some campaigns have been synced to platforms. "
    "Use force=true to override."
)


class GuardState(str, enum.Enum):
    NOT_REQUESTED = "not_requested"
    SKIP_CHECK = "skip_check"
    REQUESTED = "requested"
    CHECK_SYNC = "check_sync"
    BLOCKED = "blocked"
    CLEARED = "cleared"


def has_synced_campaigns(session: Session, campaign_set_id: str) -> bool:
    """True if any campaign of the set has a sync record with a platform id"""
    stmt = (
        select(GeneratedCampaign.id)
        .join(SyncRecord, SyncRecord.generated_campaign_id == GeneratedCampaign.id)
        .where(
            GeneratedCampaign.campaign_set_id == campaign_set_id,
            SyncRecord.platform_id.is_not(None),
        )
        .limit(1)
    )
    return session.execute(stmt).first() is not None


class RegenerationGuard:
    """Decides whether prior output of a campaign set may be replaced"""

    def __init__(self, session: Session):
        self.session = session
        self.state = GuardState.NOT_REQUESTED
        self.history: List[GuardState] = []

    def _transition(self, state: GuardState) -> None:
        self.history.append(self.state)
        self.state = state

    @property
    def should_delete(self) -> bool:
        return self.state == GuardState.CLEARED

    def check(self, campaign_set_id: str, options: GenerationOptions) -> GuardState:
        """Run the guard; returns SKIP_CHECK or CLEARED, raises ConflictError when BLOCKED"""
        if not options.regenerate:
            self._transition(GuardState.SKIP_CHECK)
            return self.state

        self._transition(GuardState.REQUESTED)

        if options.force:
            logger.warning(f"Forced regeneration of campaign set {campaign_set_id}, skipping sync check")
            self._transition(GuardState.CLEARED)
            return self.state

        self._transition(GuardState.CHECK_SYNC)
        if has_synced_campaigns(self.session, campaign_set_id):
            self._transition(GuardState.BLOCKED)
            logger.warning(f"Regeneration blocked for campaign set {campaign_set_id}: synced campaigns exist")
            raise ConflictError(SYNCED_CONFLICT_MESSAGE)

        self._transition(GuardState.CLEARED)
        return self.state
