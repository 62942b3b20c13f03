import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel

from enums.backend_kind import BackendKind
from enums.catalog_seed_mode import CatalogSeedMode
from enums.db_type import DBType
from exceptions.config import InvalidSettingException
from exceptions.database import UnsupportedDatabaseTypeException

# Load .env but don't override existing environment variables
# This allows tests and deployment scripts to set DB_TYPE before import
load_dotenv(".env", override=False)

PROJECT_ROOT = Path(__file__).parent

# Database file name is fixed. It is NOT read from the environment so that
# stale file names from earlier schema iterations are never picked up again.
DB_NAME = "techmart.db"

DEFAULT_CATALOG_FILE = PROJECT_ROOT / "seed_data" / "catalog.json"

# Demo credentials, only used when DEV_SEED is enabled
DEMO_USERNAME = "admin"
DEMO_PASSWORD = "techmart123"

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_DIR = os.environ.get("LOG_DIR", "logs")
LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "7"))
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Mask sensitive data in logs

# SQL statement echo, off by default to keep logs readable
SQL_ECHO = os.environ.get("SQL_ECHO", "false") == "true"

_FALSE_VALUES = ("0", "false", "no", "off")


class DatabaseConfig(BaseModel):
    kind: BackendKind
    db_type: DBType
    location: str

    @property
    def url(self) -> str:
        return f"sqlite+aiosqlite:///{self.location}"


class SeedConfig(BaseModel):
    dev_seed: bool = True
    catalog_mode: CatalogSeedMode = CatalogSeedMode.SYNC
    catalog_file: Path = DEFAULT_CATALOG_FILE


def resolve_database_config(environ: Mapping[str, str] | None = None) -> DatabaseConfig:
    """
    Choose the storage backend from DB_TYPE.

    Args:
        environ: Environment mapping, defaults to os.environ

    Returns:
        DatabaseConfig for the embedded SQLite file DB_NAME

    Raises:
        UnsupportedDatabaseTypeException: If DB_TYPE is anything but sqlite
    """
    environ = os.environ if environ is None else environ
    raw_db_type = environ.get("DB_TYPE")
    try:
        db_type = DBType.from_string(raw_db_type)
    except ValueError:
        raise UnsupportedDatabaseTypeException(raw_db_type)

    return DatabaseConfig(kind=BackendKind.EMBEDDED_FILE, db_type=db_type, location=DB_NAME)


def resolve_seed_config(environ: Mapping[str, str] | None = None, reseed: bool = False) -> SeedConfig:
    """
    Read the seeding switches.

    Args:
        environ: Environment mapping, defaults to os.environ
        reseed: Force the destructive delete-then-insert catalog refresh (--reseed)

    Returns:
        SeedConfig built from DEV_SEED, CATALOG_SEED_MODE and CATALOG_FILE

    Raises:
        InvalidSettingException: If CATALOG_SEED_MODE is not 'sync' or 'reseed'
    """
    environ = os.environ if environ is None else environ

    dev_seed = environ.get("DEV_SEED", "1").strip().lower() not in _FALSE_VALUES

    if reseed:
        catalog_mode = CatalogSeedMode.RESEED
    else:
        raw_mode = environ.get("CATALOG_SEED_MODE", CatalogSeedMode.SYNC.value)
        try:
            catalog_mode = CatalogSeedMode(raw_mode.strip().lower())
        except ValueError:
            raise InvalidSettingException("CATALOG_SEED_MODE", raw_mode, [mode.value for mode in CatalogSeedMode])

    catalog_file = environ.get("CATALOG_FILE")
    return SeedConfig(
        dev_seed=dev_seed,
        catalog_mode=catalog_mode,
        catalog_file=Path(catalog_file) if catalog_file else DEFAULT_CATALOG_FILE,
    )
