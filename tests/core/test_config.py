"""Configuration — URL normalization and reported site metadata."""

from smartsales.config import Settings, normalize_database_url


def test_hosted_postgres_urls_use_asyncpg():
    assert normalize_database_url("postgres://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert normalize_database_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"


def test_async_urls_untouched():
    assert normalize_database_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"


def test_settings_normalize_on_load():
    settings = Settings(database_url="postgresql://a:b@c/d")
    assert settings.database_url == "postgresql+asyncpg://a:b@c/d"


def test_site_metadata_keys():
    metadata = Settings(site_name="Corner Shop").site_metadata()
    assert metadata["site_name"] == "Corner Shop"
    assert metadata["plugin_name"] == "AI Smart Sales"
    assert set(metadata) == {
        "plugin_name", "plugin_version", "site_url", "site_name",
        "site_language", "python_version", "platform",
    }
