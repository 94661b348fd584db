import json
from typing import Annotated, Any

from fastapi import APIRouter, Path, Request

from watchdog_checks.core.dependencies import CheckServiceDep
from watchdog_checks.core.errors import ValidationFailed
from watchdog_checks.core.messages import ErrorMessages
from watchdog_checks.schemas.check import ApiResponse, CheckRead, ChecksPage, ErrorResponse

router = APIRouter(tags=["Checks"])

ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Monitor not found"},
    422: {"model": ErrorResponse, "description": "Invalid path, query or body"},
    500: {"model": ErrorResponse, "description": "Check storage failure"},
}

QUERY_DESCRIPTION = (
    "Optional query parameters: `page` (>= 0), `rowsPerPage` (1-100), "
    "`status` (true/false), `dateRange` (day, week, month, all), "
    "`sortOrder` (asc, desc; default desc). Without `page` and `rowsPerPage` "
    "at most 1000 checks are returned (`PAGINATION__MAX_UNPAGED_ROWS`), "
    "while `checksCount` still reports every match."
)


async def read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        raise ValidationFailed(ErrorMessages.INVALID_BODY) from None


@router.post(
    "/monitors/{monitorId}/checks",
    response_model=ApiResponse[CheckRead],
    responses=ERROR_RESPONSES,
    summary="Store a check result",
    description="Called by the monitor-execution process once per observation of a monitor."
)
async def create_check(
    monitor_id: Annotated[str, Path(alias="monitorId")],
    request: Request,
    service: CheckServiceDep
):
    body = await read_json_body(request)
    return await service.create_check({"monitorId": monitor_id}, body)


@router.get(
    "/monitors/{monitorId}/checks",
    response_model=ApiResponse[ChecksPage],
    responses=ERROR_RESPONSES,
    summary="Get check history of a monitor",
    description=f"Returns one page of checks and the total number of matching checks. {QUERY_DESCRIPTION}"
)
async def get_checks(
    monitor_id: Annotated[str, Path(alias="monitorId")],
    request: Request,
    service: CheckServiceDep
):
    return await service.get_checks({"monitorId": monitor_id}, request.query_params)


@router.get(
    "/teams/{teamId}/checks",
    response_model=ApiResponse[list[CheckRead]],
    responses=ERROR_RESPONSES,
    summary="Get checks of all monitors of a team",
    description=f"Returns the checks of every monitor owned by the team as one list. {QUERY_DESCRIPTION}"
)
async def get_team_checks(
    team_id: Annotated[str, Path(alias="teamId")],
    request: Request,
    service: CheckServiceDep
):
    return await service.get_team_checks({"teamId": team_id}, request.query_params)
