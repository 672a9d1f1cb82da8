# stack_setup/step_executor.py
# -*- coding: utf-8 -*-
"""
Provides functionality to execute individual setup steps.

A step is either skipped (its precondition gate says there is nothing to
do), or run once. There is no retry: a failing step is reported and the
caller decides to stop.
"""

import logging
from typing import Optional

from common.command_utils import log_setup
from stack_setup.base_step import BaseStep

module_logger = logging.getLogger(__name__)


def execute_step(
    step: BaseStep,
    current_logger_instance: Optional[logging.Logger] = None,
) -> bool:
    """
    Execute a single setup step.

    Args:
        step: The step instance to run.
        current_logger_instance: The logger instance to use.

    Returns:
        True if the step succeeded or was skipped.
        False if the step returned False or raised.
    """
    logger_to_use = (
        current_logger_instance if current_logger_instance else module_logger
    )
    app_settings = step.app_settings
    symbols = app_settings.symbols
    description = step.get_description() or step.name

    log_setup(
        f"{symbols.get('step', '➡️')} {description} ({step.name})",
        "info",
        logger_to_use,
        app_settings,
    )

    reason = step.skip_reason()
    if reason:
        log_setup(
            f"  {symbols.get('warning', '!')} {reason}",
            "warning",
            logger_to_use,
            app_settings,
        )
        return True

    try:
        step_result = step.run()
    except Exception as e:
        log_setup(
            f"{symbols.get('error', '❌')} FAILED: {description} ({step.name})",
            "error",
            logger_to_use,
            app_settings,
        )
        log_setup(
            f"   Error details: {str(e)}",
            "error",
            logger_to_use,
            app_settings,
            exc_info=True,
        )
        return False

    if step_result is False:
        log_setup(
            f"{symbols.get('error', '❌')} Step returned False: {description} ({step.name})",
            "error",
            logger_to_use,
            app_settings,
        )
        return False

    log_setup(
        f"  {symbols.get('success', '✓')} {description} completed",
        "success",
        logger_to_use,
        app_settings,
    )
    return True
