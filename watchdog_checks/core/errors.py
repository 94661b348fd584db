from fastapi import status

from watchdog_checks.core.messages import ErrorMessages


class ApiError(Exception):
    """Base error rendered as a ``{success: false, msg}`` envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, msg: str, status_code: int | None = None):
        super().__init__(msg)
        self.msg = msg
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(ApiError):
    """Malformed or missing path, query or body field."""

    status_code = 422


class RepositoryError(ApiError):
    """Any failure raised by a check repository."""

    def __init__(self, msg: str = ErrorMessages.DATA_ACCESS, status_code: int | None = None):
        super().__init__(msg, status_code)


class MonitorNotFoundError(RepositoryError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, monitor_id: str):
        super().__init__(ErrorMessages.MONITOR_NOT_FOUND)
        self.monitor_id = monitor_id
