"""
Tests for core/config.py and engine construction.
"""

import logging
from contextlib import nullcontext
from types import SimpleNamespace

from jobs_api import database
from jobs_api.core.config import Settings
from jobs_api.database import build_engine, check_connection


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "API_HOST", "CORS_ORIGINS", "DB_SSLMODE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.PORT == 10000
        assert settings.API_HOST == "0.0.0.0"
        assert settings.DB_SSLMODE == "require"
        assert settings.cors_origins_list == ["*"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DB_HOST", "db.internal")

        settings = Settings(_env_file=None)

        assert settings.PORT == 8080
        assert settings.DB_HOST == "db.internal"

    def test_database_url_from_parts(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = Settings(
            _env_file=None,
            DB_USER="jobs",
            DB_PASSWORD="p@ss:word",
            DB_HOST="db.internal",
            DB_PORT=6543,
            DB_NAME="jobboard",
        )

        url = settings.database_url

        assert url.drivername == "postgresql+psycopg2"
        assert url.username == "jobs"
        assert url.password == "p@ss:word"
        assert url.host == "db.internal"
        assert url.port == 6543
        assert url.database == "jobboard"

    def test_database_url_override(self):
        settings = Settings(_env_file=None, DATABASE_URL="sqlite:///jobs.db", DB_HOST="ignored")

        assert settings.database_url.get_backend_name() == "sqlite"

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, CORS_ORIGINS="https://a.example, https://b.example,")

        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]


class TestBuildEngine:

    def test_postgres_pool_is_bounded(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = Settings(_env_file=None, DB_HOST="db.internal", DB_NAME="jobboard", DB_POOL_SIZE=3)

        engine = build_engine(settings)

        assert engine.dialect.name == "postgresql"
        assert engine.pool.size() == 3
        engine.dispose()

    def test_postgres_connections_use_ssl_without_verification(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("DB_SSLMODE", raising=False)
        calls = []
        monkeypatch.setattr(database, "create_engine", lambda url, **kwargs: calls.append((url, kwargs)))

        settings = Settings(_env_file=None, DB_HOST="db.internal", DB_NAME="jobboard", DB_POOL_SIZE=4)
        build_engine(settings)

        url, kwargs = calls[0]
        assert url.get_backend_name() == "postgresql"
        assert kwargs["connect_args"] == {"sslmode": "require"}
        assert kwargs["pool_size"] == 4
        assert kwargs["max_overflow"] == 0


class TestCheckConnection:

    def test_logs_postgres_by_name(self, caplog):
        engine = SimpleNamespace(connect=nullcontext, dialect=SimpleNamespace(name="postgresql"))

        with caplog.at_level(logging.INFO, logger="jobs_api.database"):
            assert check_connection(engine) is True

        assert "Connected to PostgreSQL database" in caplog.text

    def test_sqlite_connection(self, engine, caplog):
        with caplog.at_level(logging.INFO, logger="jobs_api.database"):
            assert check_connection(engine) is True

        assert "Connected to SQLite database" in caplog.text
