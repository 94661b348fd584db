from typing import Annotated

from fastapi import Depends

from watchdog_checks.core.database import DBSession
from watchdog_checks.repositories.base import CheckRepository
from watchdog_checks.repositories.sql import SqlAlchemyCheckRepository
from watchdog_checks.services.check import CheckService


async def get_check_repository(session: DBSession) -> CheckRepository:
    return SqlAlchemyCheckRepository(session)


CheckRepositoryDep = Annotated[CheckRepository, Depends(get_check_repository)]


async def get_check_service(repository: CheckRepositoryDep) -> CheckService:
    return CheckService(repository)


CheckServiceDep = Annotated[CheckService, Depends(get_check_service)]
