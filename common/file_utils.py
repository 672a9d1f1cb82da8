# common/file_utils.py
# -*- coding: utf-8 -*-
"""
File system utility functions: permission changes and reading generated files.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from stack_setup.config_models import AppSettings

from .command_utils import get_symbols, log_setup, run_command

module_logger = logging.getLogger(__name__)


def relax_permissions(
    paths: List[Union[str, Path]],
    mode: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Recursively chmod `paths` to `mode`, tolerating failure.

    Paths that do not exist are left out. A failing chmod (typically
    files owned by a container user) is logged as a warning and does not
    abort the run.

    Parameters:
        paths: Files or directories to change.
        mode: Octal mode string, e.g. "755".
        app_settings: Application settings, used for logging symbols.
        current_logger: Logger instance to use.

    Returns:
        bool: True if chmod succeeded or there was nothing to change,
            False if it reported an error.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    existing = [str(p) for p in paths if Path(p).exists()]
    if not existing:
        log_setup(
            f"{symbols.get('info', 'ℹ️')} Nothing to chmod; none of {', '.join(str(p) for p in paths)} exist.",
            "debug",
            logger_to_use,
            app_settings,
        )
        return True

    result = run_command(
        ["chmod", "-R", mode] + existing,
        app_settings,
        check=False,
        capture_output=True,
        current_logger=logger_to_use,
    )
    if result.returncode != 0:
        log_setup(
            f"{symbols.get('warning', '!')} Could not chmod {mode} {' '.join(existing)} (rc {result.returncode}). Continuing.",
            "warning",
            logger_to_use,
            app_settings,
        )
        return False
    return True


def read_text_file(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file, keeping its line endings."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()
