"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import logging
import sys
import os

import pytest
import pytest_asyncio
from sqlalchemy import create_engine

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
import db
from bootstrap import initialize
from config import SeedConfig, resolve_database_config
from db import open_store
from utils.logging_config import SQL_LOGGERS
from utils.schema_migrator import migrate

SEED_ENV_VARS = ["DB_TYPE", "DEV_SEED", "CATALOG_SEED_MODE", "CATALOG_FILE"]


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """
    Run every test in an empty working directory.

    techmart.db is always created relative to the working directory, so each
    test gets its own database. The seed environment and the process-wide
    store are reset as well.
    """
    for name in SEED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(db, "_store", None)
    return tmp_path


# ============================================================================
# Config Fixtures
# ============================================================================

@pytest.fixture
def db_config():
    return resolve_database_config({})


@pytest.fixture
def seed_config():
    return SeedConfig()


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def opened_store(db_config):
    """Store on a fresh techmart.db, schema NOT migrated yet."""
    store = await open_store(db_config)
    yield store
    await store.dispose()


@pytest_asyncio.fixture
async def migrated_store(opened_store):
    """Store with all tables created but no seed data."""
    await migrate(opened_store.engine)
    return opened_store


@pytest_asyncio.fixture
async def store(db_config, seed_config):
    """Fully initialized store (migrated, seeded, foreign keys enforced)."""
    store = await initialize(db_config, seed_config)
    yield store
    await store.dispose()


@pytest.fixture
def sync_engine(workdir):
    """
    Plain synchronous engine on techmart.db for preparing and inspecting the file.

    Foreign keys are not enforced on these connections (SQLite default).
    """
    engine = create_engine(f"sqlite:///{config.DB_NAME}", echo=False)
    yield engine
    engine.dispose()


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def restore_root_logger():
    """Give back the root logger handlers and SQL logger settings after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    for logger_name in SQL_LOGGERS:
        logging.getLogger(logger_name).propagate = True
