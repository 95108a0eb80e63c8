from config import Settings


def test_database_url_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(
        _env_file=None,
        DB_HOST="pg",
        DB_PORT=6543,
        DB_NAME="store",
        DB_USER="app",
        DB_PASSWORD="secret",
    )
    assert settings.database_url == "postgresql+psycopg://app:secret@pg:6543/store"


def test_database_url_override():
    settings = Settings(_env_file=None, DATABASE_URL="sqlite:///./local.db")
    assert settings.database_url == "sqlite:///./local.db"


def test_environment_values(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://127.0.0.1:3000")
    settings = Settings(_env_file=None)
    assert settings.PORT == 8080
    assert settings.cors_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]
