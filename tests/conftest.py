import logging

import pytest

from sqlalchemy import create_engine, text
from sqlalchemy.ext.asyncio import create_async_engine

from people_mapper.base.schema import create_schema, metadata
from people_mapper.logger import logger

# Same columns as the mapped table, without the UNIQUE constraint on email
PEOPLE_WITHOUT_UNIQUE_EMAIL = text(
    "CREATE TABLE people ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "first_name VARCHAR(255) NOT NULL, "
    "last_name VARCHAR(255) NOT NULL, "
    "email VARCHAR(255) NOT NULL)"
)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def conn(engine):
    with engine.begin() as conn:
        yield conn

@pytest.fixture
def loose_conn():
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        conn.execute(PEOPLE_WITHOUT_UNIQUE_EMAIL)
        yield conn
    engine.dispose()

@pytest.fixture
async def async_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'people.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine
    await engine.dispose()

@pytest.fixture
async def async_conn(async_engine):
    async with async_engine.begin() as conn:
        yield conn

@pytest.fixture
async def async_loose_conn(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'loose.db'}")
    async with engine.begin() as conn:
        await conn.execute(PEOPLE_WITHOUT_UNIQUE_EMAIL)
        yield conn
    await engine.dispose()

@pytest.fixture
def restore_logger():
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
