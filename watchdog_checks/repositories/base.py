from typing import Protocol

from watchdog_checks.schemas.check import CheckCreate, CheckQuery, CheckRead


class CheckRepository(Protocol):
    """
    Persistence boundary for checks.

    Implementations raise ``MonitorNotFoundError`` when a check references an
    unknown monitor and ``RepositoryError`` for any other storage failure.
    """

    async def create_check(self, data: CheckCreate) -> CheckRead:
        ...

    async def get_checks(self, query: CheckQuery) -> list[CheckRead]:
        """Checks of ``query.monitor_id``, filtered, sorted and windowed."""
        ...

    async def get_checks_count(self, query: CheckQuery) -> int:
        """Number of checks matching the same filters, ignoring the page window."""
        ...

    async def get_team_checks(self, query: CheckQuery) -> list[CheckRead]:
        """Checks of every monitor owned by ``query.team_id`` as one flat list."""
        ...
