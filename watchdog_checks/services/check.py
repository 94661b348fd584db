import logging
from typing import Any, Mapping

from watchdog_checks.core.messages import SuccessMessages
from watchdog_checks.core.validation import (
    validate_create_check,
    validate_get_checks,
    validate_get_team_checks,
)
from watchdog_checks.repositories.base import CheckRepository
from watchdog_checks.schemas.check import ApiResponse

logger = logging.getLogger(__name__)


class CheckService:
    """
    Validates check requests, delegates to the repository and wraps the
    result in the ``{success, msg, data}`` envelope.

    Repository errors are never caught here; they reach the exception
    handlers registered on the application.
    """

    def __init__(self, repository: CheckRepository):
        self.repository = repository

    async def create_check(self, params: Mapping[str, Any], body: Any) -> ApiResponse:
        data = validate_create_check(params, body)

        check = await self.repository.create_check(data)
        logger.info(
            "Check stored for monitor %s (status=%s, code=%s)",
            data.monitor_id, data.status, data.status_code
        )

        return ApiResponse(msg=SuccessMessages.CHECK_CREATE, data=check)

    async def get_checks(self, params: Mapping[str, Any], query: Mapping[str, Any]) -> ApiResponse:
        check_query = validate_get_checks(params, query)

        # Two independent reads, the count ignores the page window
        checks = await self.repository.get_checks(check_query)
        checks_count = await self.repository.get_checks_count(check_query)

        return ApiResponse(
            msg=SuccessMessages.CHECK_GET,
            data={"checksCount": checks_count, "checks": checks},
        )

    async def get_team_checks(self, params: Mapping[str, Any], query: Mapping[str, Any]) -> ApiResponse:
        check_query = validate_get_team_checks(params, query)

        checks = await self.repository.get_team_checks(check_query)

        return ApiResponse(msg=SuccessMessages.CHECK_GET, data=checks)
