"""
Request validation for the check operations.

Every operation validates its raw path parameters, query string and body
against declarative pydantic schemas before touching a repository. The first
violation is turned into a ``ValidationFailed`` (HTTP 422) that names the
offending field, e.g. ``"responseTime: Input should be greater than or equal to 0"``.
"""
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from watchdog_checks.core.errors import ValidationFailed
from watchdog_checks.core.messages import ErrorMessages
from watchdog_checks.schemas.check import (
    CheckCreate,
    CheckQuery,
    ChecksQueryParams,
    MonitorPathParams,
    TeamPathParams,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_error(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    if not location:
        return error["msg"]
    return f"{location}: {error['msg']}"


def validate(schema: type[ModelT], data: Any) -> ModelT:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(format_error(exc.errors()[0])) from None


def validate_create_check(params: Mapping[str, Any], body: Any) -> CheckCreate:
    path = validate(MonitorPathParams, dict(params))
    if not isinstance(body, dict):
        raise ValidationFailed(ErrorMessages.INVALID_BODY)

    check = validate(CheckCreate, body)
    if check.monitor_id != path.monitor_id:
        raise ValidationFailed(ErrorMessages.MONITOR_ID_MISMATCH)
    return check


def validate_get_checks(params: Mapping[str, Any], query: Mapping[str, Any]) -> CheckQuery:
    path = validate(MonitorPathParams, dict(params))
    filters = validate(ChecksQueryParams, dict(query))
    return CheckQuery(monitor_id=path.monitor_id, **filters.model_dump())


def validate_get_team_checks(params: Mapping[str, Any], query: Mapping[str, Any]) -> CheckQuery:
    path = validate(TeamPathParams, dict(params))
    filters = validate(ChecksQueryParams, dict(query))
    return CheckQuery(team_id=path.team_id, **filters.model_dump())
