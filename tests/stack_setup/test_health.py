from unittest.mock import MagicMock

import requests

from stack_setup.health import check_endpoint, check_endpoints


def test_check_endpoint_returns_status(mocker):
    get_mock = mocker.patch(
        "stack_setup.health.requests.get", return_value=MagicMock(status_code=200)
    )
    assert check_endpoint("http://localhost:8888", timeout=2) == 200
    get_mock.assert_called_once_with("http://localhost:8888", timeout=2)


def test_check_endpoint_connection_refused(mocker):
    mocker.patch(
        "stack_setup.health.requests.get",
        side_effect=requests.exceptions.ConnectionError("refused"),
    )
    assert check_endpoint("http://localhost:8888") is None


def test_check_endpoint_timeout(mocker):
    mocker.patch(
        "stack_setup.health.requests.get",
        side_effect=requests.exceptions.Timeout("slow"),
    )
    assert check_endpoint("http://localhost:8888") is None


def test_check_endpoints_skips_plain_host_ports(mocker, app_settings, mock_logger):
    get_mock = mocker.patch(
        "stack_setup.health.requests.get", return_value=MagicMock(status_code=200)
    )

    results = check_endpoints(app_settings, mock_logger)

    checked = [call.args[0] for call in get_mock.call_args_list]
    assert all(url.startswith("http") for url in checked)
    assert "PostgreSQL" not in results
    assert "Redis" not in results
    assert results["Backend API"] == 200


def test_check_endpoints_reports_unreachable(mocker, app_settings, mock_logger):
    mocker.patch(
        "stack_setup.health.requests.get",
        side_effect=requests.exceptions.ConnectionError("refused"),
    )

    results = check_endpoints(app_settings, mock_logger)

    assert results
    assert all(status is None for status in results.values())
    mock_logger.error.assert_called()
