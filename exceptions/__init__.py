"""
Custom exceptions for the TechMart backend.

This module provides a hierarchy of custom exceptions for consistent error handling
throughout the application.

Exception Hierarchy:
--------------------
TechMartException (base)
├── InvalidSettingException
├── DatabaseException
│   ├── UnsupportedDatabaseTypeException
│   ├── DatabaseConnectionException
│   ├── SchemaMigrationException
│   ├── StoreNotInitializedException
│   └── StoreAlreadyInitializedException
└── SeedException
    ├── CredentialSeedException
    ├── CatalogSeedException
    └── InvalidCatalogException

Usage:
------
The bootstrap pipeline raises specific exceptions:
    raise SchemaMigrationException(table="items", reason=str(e))

The entry point catches the base class and terminates:
    try:
        asyncio.run(init_db())
    except TechMartException as e:
        logging.critical(str(e))
        sys.exit(1)
"""

from .base import TechMartException
from .config import InvalidSettingException
from .database import (
    DatabaseException,
    UnsupportedDatabaseTypeException,
    DatabaseConnectionException,
    SchemaMigrationException,
    StoreNotInitializedException,
    StoreAlreadyInitializedException
)
from .seed import SeedException, CredentialSeedException, CatalogSeedException, InvalidCatalogException

__all__ = [
    # Base
    'TechMartException',

    # Config
    'InvalidSettingException',

    # Database
    'DatabaseException',
    'UnsupportedDatabaseTypeException',
    'DatabaseConnectionException',
    'SchemaMigrationException',
    'StoreNotInitializedException',
    'StoreAlreadyInitializedException',

    # Seed
    'SeedException',
    'CredentialSeedException',
    'CatalogSeedException',
    'InvalidCatalogException',
]
