"""
Unit Tests for config.resolve_database_config() and config.resolve_seed_config()
"""

from pathlib import Path

import pytest

import config
from config import resolve_database_config, resolve_seed_config
from enums.backend_kind import BackendKind
from enums.catalog_seed_mode import CatalogSeedMode
from enums.db_type import DBType
from exceptions import InvalidSettingException, UnsupportedDatabaseTypeException, TechMartException


class TestResolveDatabaseConfig:
    """Test DB_TYPE handling"""

    def test_defaults_to_sqlite_file(self):
        """Test missing DB_TYPE selects the embedded SQLite file techmart.db"""
        db_config = resolve_database_config({})

        assert db_config.db_type == DBType.SQLITE
        assert db_config.kind == BackendKind.EMBEDDED_FILE
        assert db_config.location == "techmart.db"
        assert db_config.url == "sqlite+aiosqlite:///techmart.db"

    def test_empty_value_is_default(self):
        """Test DB_TYPE= behaves like an unset variable"""
        assert resolve_database_config({"DB_TYPE": ""}).db_type == DBType.SQLITE

    def test_exact_sqlite_value(self):
        assert resolve_database_config({"DB_TYPE": "sqlite"}).db_type == DBType.SQLITE

    @pytest.mark.parametrize("value", ["postgres", "mysql", "sqlite3", "SQLite", "SQLITE", " sqlite "])
    def test_unsupported_type_raises(self, value):
        """Test any other DB_TYPE is a configuration error"""
        with pytest.raises(UnsupportedDatabaseTypeException) as exc_info:
            resolve_database_config({"DB_TYPE": value})

        assert "only SQLite is currently supported" in str(exc_info.value)
        assert exc_info.value.db_type == value
        assert isinstance(exc_info.value, TechMartException)

    def test_location_ignores_environment(self):
        """Test the file name cannot be overridden from the environment"""
        db_config = resolve_database_config({"DB_NAME": "old.db", "DATABASE_URL": "sqlite:///other.db"})
        assert db_config.location == config.DB_NAME == "techmart.db"

    def test_reads_process_environment(self, monkeypatch):
        """Test os.environ is used when no mapping is given"""
        monkeypatch.setenv("DB_TYPE", "postgres")
        with pytest.raises(UnsupportedDatabaseTypeException):
            resolve_database_config()


class TestResolveSeedConfig:
    """Test DEV_SEED, CATALOG_SEED_MODE and CATALOG_FILE handling"""

    def test_defaults(self):
        """Test demo user on, catalog sync, bundled catalog file"""
        seed_config = resolve_seed_config({})

        assert seed_config.dev_seed is True
        assert seed_config.catalog_mode == CatalogSeedMode.SYNC
        assert seed_config.catalog_file == config.DEFAULT_CATALOG_FILE
        assert seed_config.catalog_file.exists()

    @pytest.mark.parametrize("value", ["0", "false", "No", " off "])
    def test_dev_seed_disabled(self, value):
        """Test falsy DEV_SEED values turn the demo user off"""
        assert resolve_seed_config({"DEV_SEED": value}).dev_seed is False

    @pytest.mark.parametrize("value", ["1", "true", "yes"])
    def test_dev_seed_enabled(self, value):
        assert resolve_seed_config({"DEV_SEED": value}).dev_seed is True

    def test_reseed_mode_from_environment(self):
        assert resolve_seed_config({"CATALOG_SEED_MODE": "RESEED"}).catalog_mode == CatalogSeedMode.RESEED

    def test_reseed_flag_wins(self):
        """Test --reseed overrides CATALOG_SEED_MODE=sync"""
        seed_config = resolve_seed_config({"CATALOG_SEED_MODE": "sync"}, reseed=True)
        assert seed_config.catalog_mode == CatalogSeedMode.RESEED

    def test_invalid_mode_raises(self):
        with pytest.raises(InvalidSettingException) as exc_info:
            resolve_seed_config({"CATALOG_SEED_MODE": "upsert"})

        assert "CATALOG_SEED_MODE" in str(exc_info.value)
        assert exc_info.value.allowed == ["sync", "reseed"]

    def test_catalog_file_override(self, tmp_path):
        catalog_file = tmp_path / "catalog.json"
        seed_config = resolve_seed_config({"CATALOG_FILE": str(catalog_file)})
        assert seed_config.catalog_file == Path(catalog_file)
