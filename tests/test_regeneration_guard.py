import pytest
from sqlalchemy import select

from adgen.core.exceptions import ConflictError
from adgen.models import GeneratedCampaign, Platform, SyncRecord, SyncStatus
from adgen.schemas.campaign_sets import GenerationOptions
from adgen.services.regeneration_guard import (
    GuardState,
    RegenerationGuard,
    SYNCED_CONFLICT_MESSAGE,
    has_synced_campaigns,
)

from factories import PRODUCT_ROWS, generation_config


@pytest.fixture
def generated_set(service, make_data_source, make_campaign_set):
    data_source = make_data_source(PRODUCT_ROWS)
    campaign_set = make_campaign_set(data_source)
    service.generate_campaigns(generation_config(campaign_set.id, data_source.id))
    return campaign_set


def _add_sync_record(db, campaign_set_id, platform_id):
    campaign = db.scalars(
        select(GeneratedCampaign).where(GeneratedCampaign.campaign_set_id == campaign_set_id)
    ).first()
    db.add(SyncRecord(
        generated_campaign_id=campaign.id,
        platform=Platform.GOOGLE,
        platform_id=platform_id,
        sync_status=SyncStatus.SYNCED if platform_id else SyncStatus.PENDING,
    ))
    db.commit()


def test_not_requested_skips_check(db, generated_set, monkeypatch):
    monkeypatch.setattr(
        "adgen.services.regeneration_guard.has_synced_campaigns",
        lambda *args: pytest.fail("sync check must not run"),
    )
    guard = RegenerationGuard(db)

    assert guard.check(generated_set.id, GenerationOptions()) == GuardState.SKIP_CHECK
    assert not guard.should_delete


def test_cleared_when_nothing_synced(db, generated_set):
    _add_sync_record(db, generated_set.id, platform_id=None)
    guard = RegenerationGuard(db)

    state = guard.check(generated_set.id, GenerationOptions(regenerate=True))

    assert state == GuardState.CLEARED
    assert guard.should_delete
    assert guard.history == [GuardState.NOT_REQUESTED, GuardState.REQUESTED, GuardState.CHECK_SYNC]


def test_blocked_when_a_campaign_is_synced(db, generated_set):
    _add_sync_record(db, generated_set.id, platform_id="t2_abc123")
    guard = RegenerationGuard(db)

    with pytest.raises(ConflictError, match="Cannot regenerate: some campaigns have been synced"):
        guard.check(generated_set.id, GenerationOptions(regenerate=True))

    assert guard.state == GuardState.BLOCKED
    assert not guard.should_delete


def test_force_skips_the_sync_query(db, generated_set, monkeypatch):
    _add_sync_record(db, generated_set.id, platform_id="t2_abc123")
    monkeypatch.setattr(
        "adgen.services.regeneration_guard.has_synced_campaigns",
        lambda *args: pytest.fail("sync check must not run when forced"),
    )
    guard = RegenerationGuard(db)

    state = guard.check(generated_set.id, GenerationOptions(regenerate=True, force=True))

    assert state == GuardState.CLEARED
    assert GuardState.CHECK_SYNC not in guard.history


def test_has_synced_campaigns_is_scoped_to_set(db, generated_set, make_campaign_set):
    other_set = make_campaign_set()
    _add_sync_record(db, generated_set.id, platform_id="t2_abc123")

    assert has_synced_campaigns(db, generated_set.id)
    assert not has_synced_campaigns(db, other_set.id)


def test_conflict_message():
    assert SYNCED_CONFLICT_MESSAGE.startswith(
        "Cannot regenerate: some campaigns have been synced to platforms"
    )
