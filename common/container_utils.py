# common/container_utils.py
# -*- coding: utf-8 -*-
"""
Helpers for driving the container runtime and its compose mechanism.

Every project-level side effect of the bootstrapper goes through a
throwaway container (`<runtime> run --rm`) or through `<runtime> compose`,
so the host only needs the container runtime itself.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from common.command_utils import get_symbols, log_setup, run_command
from stack_setup import config as static_config
from stack_setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


class ContainerRuntimeUnavailableError(Exception):
    """Raised when the container runtime does not answer a status query."""

    def __init__(
        self,
        message: str,
        runtime_command: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.runtime_command = runtime_command
        self.original_error = original_error
        super().__init__(message)


def is_container_runtime_available(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Query the container runtime status with `<runtime> info`.

    Returns:
        True if the runtime answered with exit code 0, False if it answered
        with an error.

    Raises:
        FileNotFoundError: If the runtime binary is not installed.
    """
    logger_to_use = current_logger if current_logger else module_logger
    result = run_command(
        [app_settings.container_runtime_command, "info"],
        app_settings,
        check=False,
        capture_output=True,
        current_logger=logger_to_use,
    )
    return result.returncode == 0


def ensure_container_runtime(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Abort unless the container runtime is running.

    Raises:
        ContainerRuntimeUnavailableError: If the runtime is not installed or
            does not respond. `original_error` holds the lookup error when
            the binary is missing.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    runtime = app_settings.container_runtime_command

    try:
        available = is_container_runtime_available(app_settings, logger_to_use)
    except FileNotFoundError as e:
        message = (
            f"{runtime.capitalize()} is not installed or not in PATH. "
            f"Please install {runtime.capitalize()} and try again."
        )
        log_setup(
            f"{symbols.get('error', '❌')} Error: {message}",
            "error",
            logger_to_use,
            app_settings,
        )
        raise ContainerRuntimeUnavailableError(
            message, runtime_command=runtime, original_error=e
        ) from e

    if not available:
        message = (
            f"{runtime.capitalize()} is not running. "
            f"Please start {runtime.capitalize()} and try again."
        )
        log_setup(
            f"{symbols.get('error', '❌')} Error: {message}",
            "error",
            logger_to_use,
            app_settings,
        )
        raise ContainerRuntimeUnavailableError(message, runtime_command=runtime)


def build_run_command(
    app_settings: AppSettings,
    image: str,
    mount_dir: Union[str, Path],
    command: List[str],
    interactive: bool = False,
) -> List[str]:
    """
    Build `<runtime> run --rm [-i] -v <mount_dir>:/app -w /app <image> <command...>`.

    The mount directory is made absolute because the runtime rejects
    relative bind-mount sources.
    """
    host_dir = Path(mount_dir).resolve()
    docker_cmd = [app_settings.container_runtime_command, "run", "--rm"]
    if interactive:
        docker_cmd.append("-i")
    docker_cmd.extend([
        "-v",
        f"{host_dir}:{static_config.CONTAINER_WORKDIR}",
        "-w",
        static_config.CONTAINER_WORKDIR,
        image,
    ])
    return docker_cmd + list(command)


def run_in_container(
    app_settings: AppSettings,
    image: str,
    mount_dir: Union[str, Path],
    command: List[str],
    cmd_input: Optional[str] = None,
    current_logger: Optional[logging.Logger] = None,
) -> subprocess.CompletedProcess:
    """Run `command` in a throwaway container with `mount_dir` as its working directory."""
    return run_command(
        build_run_command(
            app_settings,
            image,
            mount_dir,
            command,
            interactive=cmd_input is not None,
        ),
        app_settings,
        cmd_input=cmd_input,
        current_logger=current_logger,
    )


def run_shell_in_container(
    app_settings: AppSettings,
    image: str,
    mount_dir: Union[str, Path],
    commands: List[List[str]],
    cmd_input: Optional[str] = None,
    current_logger: Optional[logging.Logger] = None,
) -> subprocess.CompletedProcess:
    """
    Run several commands chained with `&&` through `sh -c` in one container.

    The chain stops at the first failing command, and so does the container.
    """
    script = " && ".join(shlex.join(cmd) for cmd in commands)
    return run_in_container(
        app_settings,
        image,
        mount_dir,
        ["sh", "-c", script],
        cmd_input=cmd_input,
        current_logger=current_logger,
    )


def write_file_via_container(
    app_settings: AppSettings,
    target_dir: Union[str, Path],
    relative_path: str,
    content: str,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """
    Overwrite `target_dir/relative_path` with `content`.

    Files created by the package-manager containers belong to the
    container's user, so by default the content is piped into the helper
    image rather than written from the host.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    if not app_settings.write_files_via_container:
        destination = Path(target_dir) / relative_path
        log_setup(
            f"{symbols.get('gear', '⚙️')} Writing {destination}",
            "info",
            logger_to_use,
            app_settings,
        )
        destination.write_text(content, encoding="utf-8")
        return

    run_in_container(
        app_settings,
        app_settings.helper_image,
        target_dir,
        ["sh", "-c", f"cat > {shlex.quote(relative_path)}"],
        cmd_input=content,
        current_logger=logger_to_use,
    )


def compose(
    app_settings: AppSettings,
    args: List[str],
    capture_output: bool = False,
    current_logger: Optional[logging.Logger] = None,
) -> subprocess.CompletedProcess:
    """Run `<runtime> compose <args>` in the project directory."""
    return run_command(
        [app_settings.container_runtime_command, "compose"] + list(args),
        app_settings,
        capture_output=capture_output,
        current_logger=current_logger,
        cwd=str(app_settings.project_dir),
    )
