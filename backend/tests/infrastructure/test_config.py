"""Settings — environment overrides and database URL rewriting."""

from app.config import Settings


def test_postgres_url_is_rewritten_for_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/bb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@host:5432/bb"


def test_explicit_driver_is_kept(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings().database_url == "sqlite+aiosqlite:///:memory:"


def test_api_prefix_defaults_to_root(monkeypatch):
    monkeypatch.delenv("API_PREFIX", raising=False)
    assert Settings().api_prefix == ""
