from config import Settings


def test_settings_read_environment_at_construction(monkeypatch):
    monkeypatch.setenv("CACHE_TTL", "42")
    monkeypatch.setenv("CACHE_ENABLED", "false")
    monkeypatch.setenv("DISPLAY_TIMEZONE", "Europe/London")
    monkeypatch.setenv("REDIS_URL", "redis://cache:6380/2")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    s = Settings()

    assert s.cache_ttl == 42
    assert s.cache_enabled is False
    assert s.display_timezone == "Europe/London"
    assert s.redis_url == "redis://cache:6380/2"
    assert s.log_level == "DEBUG"
    assert s.cors_origins == ["http://a.test", "http://b.test"]


def test_redis_url_built_from_parts(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)
    monkeypatch.setenv("REDIS_HOST", "cache")
    monkeypatch.setenv("REDIS_PORT", "6390")
    monkeypatch.setenv("REDIS_DB", "3")

    assert Settings().redis_url == "redis://cache:6390/3"


def test_database_sync_url_falls_back_to_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_SYNC_URL", raising=False)
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@db/lib")

    assert Settings().database_sync_url == "postgresql+psycopg://u:p@db/lib"
