from unittest.mock import MagicMock

from stack_setup.base_step import BaseStep
from stack_setup.step_executor import execute_step


class _Step(BaseStep):
    name = "sample"
    metadata = {"dependencies": [], "description": "Sample step"}

    def __init__(self, app_settings, result=None, error=None, reason=None):
        super().__init__(app_settings)
        self.result = result
        self.error = error
        self.reason = reason
        self.ran = False

    def skip_reason(self):
        return self.reason

    def run(self):
        self.ran = True
        if self.error:
            raise self.error
        return self.result


def test_success(app_settings, mock_logger):
    step = _Step(app_settings)
    assert execute_step(step, mock_logger) is True
    assert step.ran
    mock_logger.info.assert_any_call("  ✓ Sample step completed", exc_info=False)


def test_skip_is_success_without_running(app_settings, mock_logger):
    step = _Step(app_settings, reason="Backend directory already exists")
    assert execute_step(step, mock_logger) is True
    assert not step.ran
    mock_logger.warning.assert_called_once_with(
        "  ! Backend directory already exists", exc_info=False
    )


def test_false_return_is_failure(app_settings, mock_logger):
    assert execute_step(_Step(app_settings, result=False), mock_logger) is False


def test_exception_is_failure(app_settings, mock_logger):
    step = _Step(app_settings, error=RuntimeError("boom"))
    assert execute_step(step, mock_logger) is False
    mock_logger.error.assert_any_call("   Error details: boom", exc_info=True)


def test_uses_module_logger_by_default(app_settings, mocker):
    module_logger = mocker.patch(
        "stack_setup.step_executor.module_logger", MagicMock()
    )
    execute_step(_Step(app_settings))
    module_logger.info.assert_called()
