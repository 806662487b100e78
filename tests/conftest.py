import os

# Must be set before adgen.core.database builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

from typing import Any, Dict, List, Optional

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from adgen.core.database import Base
from adgen.models import CampaignSet, DataRow, DataSource, DataSourceType
from adgen.services.campaign_generation import CampaignGenerationService


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of the test, FKs enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def service(session_factory):
    return CampaignGenerationService(session_factory)


@pytest.fixture
def statements(engine):
    """Every SQL statement sent to the database after the fixture is requested."""
    captured: List[str] = []

    @event.listens_for(engine, "before_cursor_execute")
    def _capture(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement.strip().upper())

    return captured


@pytest.fixture
def make_data_source(db):
    def _make(rows: List[Dict[str, Any]], name: str = "Products", team_id: Optional[str] = None) -> DataSource:
        data_source = DataSource(name=name, type=DataSourceType.CSV, team_id=team_id)
        db.add(data_source)
        db.flush()
        for index, row_data in enumerate(rows):
            db.add(DataRow(data_source_id=data_source.id, row_data=row_data, row_index=index))
        db.commit()
        return data_source

    return _make


@pytest.fixture
def make_campaign_set(db):
    def _make(data_source: Optional[DataSource] = None, config: Optional[Dict[str, Any]] = None,
              team_id: Optional[str] = None) -> CampaignSet:
        campaign_set = CampaignSet(
            name="Spring sale",
            team_id=team_id,
            data_source_id=data_source.id if data_source else None,
            config=config,
        )
        db.add(campaign_set)
        db.commit()
        return campaign_set

    return _make
