"""Database setup for API tests."""

import pytest_asyncio

from petshelter.config.database import create_all_tables, dispose_engine, reset_engines
from petshelter.config.settings import settings


# Setup database for each test
@pytest_asyncio.fixture(autouse=True)
async def setup_test_database(tmp_path):
    """Point the app at a fresh SQLite file and create the tables."""
    settings.TESTING = True
    settings.DATABASE_URL = f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    reset_engines()

    await create_all_tables()

    yield

    await dispose_engine()
    reset_engines()
