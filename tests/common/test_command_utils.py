import logging
import subprocess
from unittest.mock import MagicMock

import pytest

from common.command_utils import (
    get_symbols,
    log_setup,
    run_command,
)
from stack_setup.config_models import SYMBOLS_DEFAULT, AppSettings


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


@pytest.mark.parametrize(
    "level,method",
    [
        ("debug", "debug"),
        ("info", "info"),
        ("success", "info"),
        ("warning", "warning"),
        ("error", "error"),
        ("critical", "critical"),
    ],
)
def test_log_setup_routes_by_level(mock_logger, level, method):
    log_setup("hello", level, mock_logger)
    getattr(mock_logger, method).assert_called_once_with(
        "hello", exc_info=False
    )


def test_get_symbols_falls_back_to_defaults():
    assert get_symbols(None) == SYMBOLS_DEFAULT
    settings = AppSettings(symbols={"error": "E"})
    assert get_symbols(settings) == {"error": "E"}


def test_run_command_success_with_capture(mocker, mock_logger):
    run_mock = mocker.patch(
        "common.command_utils.subprocess.run",
        return_value=MagicMock(returncode=0, stdout="out\n", stderr=""),
    )

    result = run_command(
        ["docker", "info"],
        None,
        capture_output=True,
        current_logger=mock_logger,
        cwd="/tmp",
    )

    assert result.returncode == 0
    run_mock.assert_called_once_with(
        ["docker", "info"],
        check=True,
        capture_output=True,
        text=True,
        input=None,
        cwd="/tmp",
    )
    mock_logger.info.assert_any_call("   stdout: out", exc_info=False)


def test_run_command_passes_input(mocker, mock_logger):
    run_mock = mocker.patch(
        "common.command_utils.subprocess.run",
        return_value=MagicMock(returncode=0, stdout=None, stderr=None),
    )

    run_command(["cat"], None, cmd_input="data", current_logger=mock_logger)

    assert run_mock.call_args.kwargs["input"] == "data"


def test_run_command_never_goes_through_a_shell(mocker, mock_logger):
    run_mock = mocker.patch(
        "common.command_utils.subprocess.run",
        return_value=MagicMock(returncode=0),
    )

    run_command(["sh", "-c", "cat > .env"], None, current_logger=mock_logger)

    assert run_mock.call_args.args[0] == ["sh", "-c", "cat > .env"]
    assert "shell" not in run_mock.call_args.kwargs
    assert "env" not in run_mock.call_args.kwargs
    mock_logger.info.assert_any_call(
        "⚙️ Executing: sh -c \"cat > .env\" ", exc_info=False
    )


def test_run_command_called_process_error_is_logged_and_raised(mocker, mock_logger):
    error = subprocess.CalledProcessError(
        2, ["docker", "compose", "build"], output="partial", stderr="boom"
    )
    mocker.patch("common.command_utils.subprocess.run", side_effect=error)

    with pytest.raises(subprocess.CalledProcessError):
        run_command(
            ["docker", "compose", "build"],
            None,
            capture_output=True,
            current_logger=mock_logger,
        )

    mock_logger.error.assert_any_call(
        "❌ Command `docker compose build` failed (rc 2).", exc_info=False
    )
    mock_logger.error.assert_any_call("   stdout: partial", exc_info=False)
    mock_logger.error.assert_any_call("   stderr: boom", exc_info=False)


def test_run_command_missing_binary(mocker, mock_logger):
    error = FileNotFoundError(2, "No such file", "docker")
    mocker.patch("common.command_utils.subprocess.run", side_effect=error)

    with pytest.raises(FileNotFoundError):
        run_command(["docker", "info"], None, current_logger=mock_logger)

    mock_logger.error.assert_called_once_with(
        "❌ Command not found: docker. Ensure it's installed and in PATH.",
        exc_info=False,
    )
