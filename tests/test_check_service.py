"""Tests for CheckService against a stubbed repository."""

from __future__ import annotations

import asyncio

import pytest

from watchdog_checks.core.errors import RepositoryError, ValidationFailed
from watchdog_checks.core.messages import SuccessMessages
from watchdog_checks.schemas.check import CheckCreate, CheckQuery
from watchdog_checks.services.check import CheckService

VALID_BODY = {
    "monitorId": "m1",
    "status": True,
    "responseTime": 100,
    "statusCode": 200,
    "message": "ok",
}


def run(coro):
    return asyncio.run(coro)


class TestCreateCheck:
    def test_rejects_missing_path_params(self, stub_repository):
        service = CheckService(stub_repository)
        with pytest.raises(ValidationFailed) as exc_info:
            run(service.create_check({}, VALID_BODY))
        assert exc_info.value.status_code == 422
        assert exc_info.value.msg.startswith("monitorId")
        stub_repository.create_check.assert_not_called()

    def test_rejects_invalid_body(self, stub_repository):
        service = CheckService(stub_repository)
        with pytest.raises(ValidationFailed) as exc_info:
            run(service.create_check({"monitorId": "m1"}, {}))
        assert exc_info.value.status_code == 422
        stub_repository.create_check.assert_not_called()

    def test_rejects_mismatched_monitor_id(self, stub_repository):
        service = CheckService(stub_repository)
        with pytest.raises(ValidationFailed, match="monitorId"):
            run(service.create_check({"monitorId": "other"}, VALID_BODY))
        stub_repository.create_check.assert_not_called()

    def test_returns_repository_result_unmodified(self, stub_repository):
        stub_repository.create_check.return_value = {"id": "123"}
        service = CheckService(stub_repository)

        response = run(service.create_check({"monitorId": "m1"}, VALID_BODY))

        assert response.success is True
        assert response.msg == SuccessMessages.CHECK_CREATE
        assert response.data == {"id": "123"}
        stub_repository.create_check.assert_awaited_once_with(
            CheckCreate(
                monitor_id="m1",
                status=True,
                response_time=100,
                status_code=200,
                message="ok",
            )
        )

    def test_forwards_repository_error(self, stub_repository):
        error = RepositoryError()
        stub_repository.create_check.side_effect = error
        service = CheckService(stub_repository)

        with pytest.raises(RepositoryError) as exc_info:
            run(service.create_check({"monitorId": "m1"}, VALID_BODY))
        assert exc_info.value is error


class TestGetChecks:
    def test_rejects_missing_path_params(self, stub_repository):
        service = CheckService(stub_repository)
        with pytest.raises(ValidationFailed) as exc_info:
            run(service.get_checks({}, {}))
        assert exc_info.value.status_code == 422
        stub_repository.get_checks.assert_not_called()
        stub_repository.get_checks_count.assert_not_called()

    def test_rejects_invalid_query(self, stub_repository):
        service = CheckService(stub_repository)
        with pytest.raises(ValidationFailed, match="sortOrder"):
            run(service.get_checks({"monitorId": "m1"}, {"sortOrder": "sideways"}))
        stub_repository.get_checks.assert_not_called()

    def test_returns_checks_and_count(self, stub_repository):
        checks = [{"id": "2"}, {"id": "1"}]
        stub_repository.get_checks.return_value = checks
        stub_repository.get_checks_count.return_value = 2
        service = CheckService(stub_repository)

        response = run(service.get_checks({"monitorId": "m1"}, {"page": "0", "rowsPerPage": "10"}))

        assert response.msg == SuccessMessages.CHECK_GET
        assert response.data == {"checksCount": 2, "checks": checks}
        query = stub_repository.get_checks.await_args.args[0]
        assert query == CheckQuery(monitor_id="m1", page=0, rows_per_page=10)
        stub_repository.get_checks_count.assert_awaited_once_with(query)

    def test_list_failure_skips_count(self, stub_repository):
        stub_repository.get_checks.side_effect = RepositoryError()
        service = CheckService(stub_repository)

        with pytest.raises(RepositoryError):
            run(service.get_checks({"monitorId": "m1"}, {}))
        stub_repository.get_checks_count.assert_not_called()

    def test_count_failure_aborts(self, stub_repository):
        stub_repository.get_checks.return_value = []
        stub_repository.get_checks_count.side_effect = RepositoryError()
        service = CheckService(stub_repository)

        with pytest.raises(RepositoryError):
            run(service.get_checks({"monitorId": "m1"}, {}))


class TestGetTeamChecks:
    def test_rejects_missing_path_params(self, stub_repository):
        service = CheckService(stub_repository)
        with pytest.raises(ValidationFailed) as exc_info:
            run(service.get_team_checks({}, {}))
        assert exc_info.value.status_code == 422
        stub_repository.get_team_checks.assert_not_called()

    def test_returns_team_checks(self, stub_repository):
        checks = [{"id": 1, "name": "Check 1"}]
        stub_repository.get_team_checks.return_value = checks
        service = CheckService(stub_repository)

        response = run(service.get_team_checks({"teamId": "1"}, {}))

        assert response.success is True
        assert response.msg == SuccessMessages.CHECK_GET
        assert response.data == checks
        stub_repository.get_team_checks.assert_awaited_once_with(CheckQuery(team_id="1"))

    def test_forwards_repository_error(self, stub_repository):
        stub_repository.get_team_checks.side_effect = RepositoryError("Retrieval Error")
        service = CheckService(stub_repository)

        with pytest.raises(RepositoryError, match="Retrieval Error"):
            run(service.get_team_checks({"teamId": "1"}, {}))
