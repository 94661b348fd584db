import logging
from typing import List

from sqlalchemy import Select, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from watchdog_checks.core.errors import MonitorNotFoundError, RepositoryError
from watchdog_checks.models.check import Check
from watchdog_checks.models.monitor import Monitor
from watchdog_checks.schemas.check import CheckCreate, CheckQuery, CheckRead

logger = logging.getLogger(__name__)


def apply_filters(stmt: Select, query: CheckQuery) -> Select:
    """Adds the monitor/team scope, status and date range conditions."""
    if query.team_id is not None:
        stmt = stmt.join(Monitor, Check.monitor_id == Monitor.id).where(
            Monitor.team_id == query.team_id
        )
    if query.monitor_id is not None:
        stmt = stmt.where(Check.monitor_id == query.monitor_id)
    if query.status is not None:
        stmt = stmt.where(Check.status == query.status)

    since = query.since()
    if since is not None:
        stmt = stmt.where(Check.created_at >= since)
    return stmt


def apply_window(stmt: Select, query: CheckQuery) -> Select:
    if query.sort_order == "asc":
        stmt = stmt.order_by(Check.created_at.asc(), Check.id.asc())
    else:
        stmt = stmt.order_by(Check.created_at.desc(), Check.id.desc())
    return stmt.offset(query.offset).limit(query.limit)


class SqlAlchemyCheckRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_check(self, data: CheckCreate) -> CheckRead:
        try:
            monitor = await self.session.get(Monitor, data.monitor_id)
            if monitor is None:
                raise MonitorNotFoundError(data.monitor_id)

            check = Check(
                monitor_id=data.monitor_id,
                status=data.status,
                response_time=data.response_time,
                status_code=data.status_code,
                message=data.message,
            )
            self.session.add(check)

            # Use update() instead of modifying the object
            # This is an atomic operation safer in case of concurrent access
            await self.session.execute(
                update(Monitor)
                .where(Monitor.id == data.monitor_id)
                .values(last_check_status=data.status)
            )
            await self.session.commit()

            # refresh() is needed to obtain the generated fields (id, created_at)
            await self.session.refresh(check)
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.warning("Failed to store check for monitor %s: %s", data.monitor_id, exc)
            raise RepositoryError() from exc

        return CheckRead.model_validate(check)

    async def get_checks(self, query: CheckQuery) -> List[CheckRead]:
        stmt = apply_window(apply_filters(select(Check), query), query)
        return await self._fetch(stmt)

    async def get_checks_count(self, query: CheckQuery) -> int:
        stmt = apply_filters(select(func.count()).select_from(Check), query)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.warning("Failed to count checks: %s", exc)
            raise RepositoryError() from exc
        return result.scalar_one()

    async def get_team_checks(self, query: CheckQuery) -> List[CheckRead]:
        stmt = apply_window(apply_filters(select(Check), query), query)
        return await self._fetch(stmt)

    async def _fetch(self, stmt: Select) -> List[CheckRead]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.warning("Failed to read checks: %s", exc)
            raise RepositoryError() from exc
        return [CheckRead.model_validate(row) for row in result.scalars().all()]
