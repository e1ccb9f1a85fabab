import pytest
from torneo.database.config.config import settings
from torneo.database.core.models import ConnectionConfig


@pytest.fixture
def memory_config():
    """In-memory SQLite; every connection gets its own database."""
    return ConnectionConfig(driver_name="sqlite", database_name=":memory:")


@pytest.fixture
def file_config(tmp_path):
    return ConnectionConfig(driver_name="sqlite", database_name=str(tmp_path / "torneo.db"))


@pytest.fixture
def unreachable_config(tmp_path):
    """SQLite file inside a directory that does not exist."""
    return ConnectionConfig(driver_name="sqlite", database_name=str(tmp_path / "missing" / "torneo.db"))


@pytest.fixture
def sqlite_settings(monkeypatch):
    """Point the application settings at an in-memory SQLite database."""
    monkeypatch.setattr(settings, "DB_DRIVER_NAME", "sqlite")
    monkeypatch.setattr(settings, "DB_HOST", "")
    monkeypatch.setattr(settings, "DB_PORT", None)
    monkeypatch.setattr(settings, "DB_DATABASE_NAME", ":memory:")
    monkeypatch.setattr(settings, "DB_USERNAME", "")
    monkeypatch.setattr(settings, "DB_PASSWORD", "")
    return settings
