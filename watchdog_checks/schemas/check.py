from datetime import datetime, timedelta, timezone
from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel

from watchdog_checks.config.settings import settings

DataT = TypeVar("DataT")

DateRange = Literal["day", "week", "month", "all"]
SortOrder = Literal["asc", "desc"]

DATE_RANGES = {
    "day": timedelta(days=1),
    "week": timedelta(days=7),
    "month": timedelta(days=30),
}


class CamelModel(BaseModel):
    # Fields are snake_case in Python and camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Path parameters
# =============================================================================

class MonitorPathParams(CamelModel):
    monitor_id: str = Field(min_length=1)


class TeamPathParams(CamelModel):
    team_id: str = Field(min_length=1)


# =============================================================================
# Request body / query string
# =============================================================================

class CheckCreate(CamelModel):
    """Check result reported by the monitor-execution process."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    monitor_id: str = Field(min_length=1, examples=["4f0c1a9e-93a4-4b53-9f8e-1c7a1d6f0b2e"])
    status: StrictBool = Field(description="true when the target is up.")
    response_time: float = Field(
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Response time in milliseconds.",
        examples=[123.4]
    )
    status_code: StrictInt = Field(examples=[200, 404, 503])
    message: Optional[str] = Field(default=None, examples=["OK"])


class ChecksQueryParams(CamelModel):
    # Only the camelCase names are accepted in the query string
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False, extra="forbid")

    page: Optional[int] = Field(default=None, ge=0)
    rows_per_page: Optional[int] = Field(
        default=None,
        ge=1,
        le=settings.pagination.MAX_ROWS_PER_PAGE
    )
    status: Optional[bool] = None
    date_range: DateRange = "all"
    sort_order: SortOrder = "desc"


class CheckQuery(BaseModel):
    """Context handed to the repository for the read operations."""

    monitor_id: Optional[str] = None
    team_id: Optional[str] = None

    page: Optional[int] = None
    rows_per_page: Optional[int] = None
    status: Optional[bool] = None
    date_range: DateRange = "all"
    sort_order: SortOrder = "desc"

    @property
    def is_paginated(self) -> bool:
        return self.page is not None or self.rows_per_page is not None

    @property
    def limit(self) -> int:
        if not self.is_paginated:
            return settings.pagination.MAX_UNPAGED_ROWS
        return self.rows_per_page or settings.pagination.DEFAULT_ROWS_PER_PAGE

    @property
    def offset(self) -> int:
        if not self.is_paginated:
            return 0
        return (self.page or 0) * self.limit

    def since(self, now: datetime | None = None) -> datetime | None:
        """Lower bound for ``created_at``, or None for the whole history."""
        window = DATE_RANGES.get(self.date_range)
        if window is None:
            return None
        return (now or datetime.now(timezone.utc)) - window


# =============================================================================
# Responses
# =============================================================================

class CheckRead(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    monitor_id: str
    status: bool
    response_time: float
    status_code: int
    message: Optional[str] = None
    created_at: datetime


class ChecksPage(CamelModel):
    checks_count: int = Field(description="Total matching checks, ignoring the page window.")
    checks: list[CheckRead]


class ApiResponse(BaseModel, Generic[DataT]):
    success: bool = True
    msg: str
    data: DataT


class ErrorResponse(BaseModel):
    success: bool = False
    msg: str
