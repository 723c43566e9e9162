"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Dict, Any
from fastapi.testclient import TestClient

from jobs_api.core.config import Settings
from jobs_api.database import build_engine, init_schema, make_session_factory
from jobs_api.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a temporary SQLite database."""
    return Settings(_env_file=None, DATABASE_URL=f"sqlite:///{tmp_path / 'jobs.db'}")


@pytest.fixture
def client(settings):
    """Test client with the app lifespan (connection check, table creation) run."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Session on a database that already has the jobs table."""
    init_schema(engine)
    session = make_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    """Request body for creating a job."""
    return {
        "jobTitle": "Engineer",
        "companyName": "Acme",
        "location": "Remote",
        "jobType": "Full-time",
        "minSalary": 80000,
        "maxSalary": 120000,
        "description": "Build things",
        "experience": "3+ years",
        "applicationDeadline": "2025-12-31",
    }


@pytest.fixture
def job_columns() -> Dict[str, Any]:
    """Repository fields for creating a job."""
    return {
        "job_title": "Data Analyst",
        "company_name": "Globex",
        "location": "Berlin",
        "job_type": "Part-time",
        "salary_min": 40000,
        "salary_max": 60000,
        "description": None,
        "experience": None,
        "application_deadline": None,
    }
