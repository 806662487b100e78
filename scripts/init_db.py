"""
Database initialization script
Creates all tables and a demo data source / campaign set
"""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import create_engine, select, text
from sqlalchemy.exc import SQLAlchemyError

from adgen.core.config import settings
from adgen.core.database import engine, SessionLocal, Base
from adgen.models import CampaignSet, DataRow, DataSource, DataSourceType

DEMO_DATA_SOURCE_NAME = "Demo products"

DEMO_ROWS = [
    {"brand": "Nike", "category": "Shoes", "product": "Air Max", "price": 129.99},
    {"brand": "Nike", "category": "Apparel", "product": "Dri-FIT Tee", "price": 35},
    {"brand": "Adidas", "category": "Shoes", "product": "Ultraboost", "price": 180},
]


def create_database():
    """Create the database if it doesn't exist"""
    postgres_url = f"postgresql+psycopg://{settings.POSTGRES_USER}:{settings.POSTGRES_PWD}@{settings.POSTGRES_HOST}:{settings.POSTGRES_PORT}/postgres"
    temp_engine = create_engine(postgres_url, isolation_level="AUTOCOMMIT")

    with temp_engine.connect() as conn:
        result = conn.execute(
            text("SELECT 1 FROM pg_database WHERE datname = :name"),
            {"name": settings.POSTGRES_DB},
        )
        exists = result.fetchone() is not None

        if not exists:
            conn.execute(text(f'CREATE DATABASE "{settings.POSTGRES_DB}"'))
            print(f"Created database: {settings.POSTGRES_DB}")
        else:
            print(f"Database already exists: {settings.POSTGRES_DB}")

    temp_engine.dispose()


def create_tables():
    """Create all tables"""
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)
    print("All tables created successfully")


def create_initial_data():
    """Create a demo data source with rows and a campaign set that uses it"""
    session = SessionLocal()

    try:
        existing = session.scalars(
            select(DataSource).where(DataSource.name == DEMO_DATA_SOURCE_NAME)
        ).first()
        if existing:
            print("Demo data source already exists")
            return

        data_source = DataSource(name=DEMO_DATA_SOURCE_NAME, type=DataSourceType.MANUAL)
        session.add(data_source)
        session.flush()

        for index, row_data in enumerate(DEMO_ROWS):
            session.add(DataRow(data_source_id=data_source.id, row_data=row_data, row_index=index))

        campaign_set = CampaignSet(
            name="Demo campaign set",
            data_source_id=data_source.id,
            config={
                "dataSourceId": data_source.id,
                "selectedPlatforms": ["google"],
                "campaignConfig": {"namePattern": "Performance - {brand}", "objective": "conversions"},
                "hierarchyConfig": {
                    "adGroups": [
                        {
                            "namePattern": "{category}",
                            "keywords": ["{brand} {category}", "buy {brand}"],
                            "ads": [
                                {
                                    "headline": "{product} by {brand}",
                                    "description": "Only ${price}",
                                    "finalUrl": "https://example.com/{brand}",
                                }
                            ],
                        }
                    ]
                },
                "budgetConfig": {"type": "daily", "amountPattern": "50", "currency": "USD"},
            },
        )
        session.add(campaign_set)
        session.commit()
        print(f"Created demo campaign set: {campaign_set.id}")

    except SQLAlchemyError as e:
        session.rollback()
        print(f"Error creating initial data: {e}")
        raise
    finally:
        session.close()


def main():
    """Main initialization function"""
    print("=" * 50)
    print(f"{settings.APP_NAME} - Database Initialization")
    print("=" * 50)

    try:
        print("\nStep 1: Creating database...")
        if settings.database_url.startswith("postgresql"):
            create_database()

        print("\nStep 2: Creating tables...")
        create_tables()

        print("\nStep 3: Creating initial data...")
        create_initial_data()

        print("\n" + "=" * 50)
        print("Database initialization completed!")
        print("=" * 50)

    except SQLAlchemyError as e:
        print(f"\nInitialization failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
