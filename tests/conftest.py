"""Shared test fixtures."""

from __future__ import annotations

import os

# Settings are loaded at import time, the database password has no default
os.environ.setdefault("DB__PASS", "test")

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from watchdog_checks.core.dependencies import get_check_repository
from watchdog_checks.main import app
from watchdog_checks.repositories.memory import InMemoryCheckRepository
from watchdog_checks.schemas.check import CheckRead

NOW = datetime.now(timezone.utc)


def make_check(
    check_id: str,
    monitor_id: str = "m1",
    minutes_ago: int = 0,
    status: bool = True,
    status_code: int = 200,
) -> CheckRead:
    return CheckRead(
        id=check_id,
        monitor_id=monitor_id,
        status=status,
        response_time=100.0,
        status_code=status_code,
        message="ok" if status else "down",
        created_at=NOW - timedelta(minutes=minutes_ago),
    )


@pytest.fixture
def stub_repository() -> AsyncMock:
    """Repository double whose methods are awaitable stubs."""
    return AsyncMock()


@pytest.fixture
def memory_repository() -> InMemoryCheckRepository:
    """Two teams: t1 owns m1 and m2, t2 owns m3 (without checks)."""
    repository = InMemoryCheckRepository()
    repository.add_monitor("m1", team_id="t1")
    repository.add_monitor("m2", team_id="t1")
    repository.add_monitor("m3", team_id="t2")

    repository.add_check(make_check("c1", "m1", minutes_ago=30))
    repository.add_check(make_check("c2", "m1", minutes_ago=20, status=False, status_code=503))
    repository.add_check(make_check("c3", "m1", minutes_ago=10))
    repository.add_check(make_check("c4", "m2", minutes_ago=5))
    repository.add_check(make_check("c5", "m1", minutes_ago=60 * 24 * 10))
    return repository


@pytest.fixture
def client(memory_repository):
    app.dependency_overrides[get_check_repository] = lambda: memory_repository
    yield TestClient(app)
    app.dependency_overrides.clear()
