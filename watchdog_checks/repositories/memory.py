import asyncio
from datetime import datetime, timezone
from typing import List

from watchdog_checks.core.db_types import generate_id
from watchdog_checks.core.errors import MonitorNotFoundError
from watchdog_checks.schemas.check import CheckCreate, CheckQuery, CheckRead


class InMemoryCheckRepository:
    """
    Process-local check storage.

    Used by the test-suite in place of the SQL repository.
    Monitors must be registered with ``add_monitor`` before checks can be
    stored for them, mirroring the foreign key of the SQL schema.
    """

    def __init__(self):
        self._teams_by_monitor: dict[str, str] = {}
        self._checks: list[tuple[int, CheckRead]] = []
        self._sequence = 0
        self._lock = asyncio.Lock()

    def add_monitor(self, monitor_id: str, team_id: str) -> None:
        self._teams_by_monitor[monitor_id] = team_id

    def add_check(self, check: CheckRead) -> CheckRead:
        """Stores an already built check (keeps its id and timestamp)."""
        if check.monitor_id not in self._teams_by_monitor:
            raise MonitorNotFoundError(check.monitor_id)
        self._sequence += 1
        self._checks.append((self._sequence, check))
        return check

    async def create_check(self, data: CheckCreate) -> CheckRead:
        async with self._lock:
            check = CheckRead(
                id=generate_id(),
                created_at=datetime.now(timezone.utc),
                **data.model_dump(),
            )
            return self.add_check(check)

    async def get_checks(self, query: CheckQuery) -> List[CheckRead]:
        async with self._lock:
            return self._window(self._select(query), query)

    async def get_checks_count(self, query: CheckQuery) -> int:
        async with self._lock:
            return len(self._select(query))

    async def get_team_checks(self, query: CheckQuery) -> List[CheckRead]:
        async with self._lock:
            return self._window(self._select(query), query)

    def _select(self, query: CheckQuery) -> list[CheckRead]:
        since = query.since()
        rows = []
        for sequence, check in self._checks:
            if query.monitor_id is not None and check.monitor_id != query.monitor_id:
                continue
            if query.team_id is not None and self._teams_by_monitor.get(check.monitor_id) != query.team_id:
                continue
            if query.status is not None and check.status != query.status:
                continue
            if since is not None and check.created_at < since:
                continue
            rows.append((check.created_at, sequence, check))

        rows.sort(key=lambda row: (row[0], row[1]), reverse=query.sort_order == "desc")
        return [check for _, _, check in rows]

    @staticmethod
    def _window(checks: list[CheckRead], query: CheckQuery) -> list[CheckRead]:
        return checks[query.offset:query.offset + query.limit]
