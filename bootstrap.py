"""
Database bootstrap pipeline.

    resolve config -> open store -> migrate schema -> seed -> enforce foreign keys -> publish

initialize() returns the ready Store so callers can pass it on explicitly.
init_db() additionally publishes it as the process-wide store behind
db.get_store() / db.get_db_session().
"""

import logging

import config
from config import DatabaseConfig, SeedConfig
from db import Store, open_store, publish_store
from services.seed import SeedService
from utils.schema_migrator import migrate

logger = logging.getLogger(__name__)


async def initialize(db_config: DatabaseConfig, seed_config: SeedConfig) -> Store:
    """
    Open, migrate and seed the database.

    On any failure the store is disposed and the exception propagates;
    nothing is published.

    Raises:
        DatabaseConnectionException: Store cannot be opened
        SchemaMigrationException: A table cannot be reconciled
        CredentialSeedException: Demo user cannot be created
        InvalidCatalogException / CatalogSeedException: Catalog cannot be published
    """
    store = await open_store(db_config)
    try:
        await migrate(store.engine)
        async with store.session() as session:
            report = await SeedService.seed(session, seed_config)
        await store.enable_foreign_keys()
    except Exception:
        await store.dispose()
        raise

    logger.info(f"Database ready: {db_config.location} "
                f"(catalog={report.catalog_mode.value}, items={report.items_seeded}, "
                f"admin_created={report.admin_created})")
    return store


async def init_db(db_config: DatabaseConfig | None = None, seed_config: SeedConfig | None = None) -> Store:
    """
    Initialize the database and publish it as the process-wide store.

    Missing configs are resolved from the environment.
    """
    if db_config is None:
        db_config = config.resolve_database_config()
    if seed_config is None:
        seed_config = config.resolve_seed_config()

    store = await initialize(db_config, seed_config)
    try:
        publish_store(store)
    except Exception:
        await store.dispose()
        raise
    return store
