# stack_setup/summary.py
# -*- coding: utf-8 -*-
"""
Console text framing a run: the opening banner and the closing summary of
where each service listens and how to reach it.
"""

from typing import Dict, List

from stack_setup import config as static_config
from stack_setup.config_models import AppSettings

SEPARATOR = "=" * 41
LABEL_WIDTH = 18
RUNTIME_PLACEHOLDER = "{runtime}"


def _section(title: str, entries: Dict[str, str]) -> List[str]:
    lines = [f"{title}:"]
    for label, value in entries.items():
        lines.append(f"  - {(label + ':').ljust(LABEL_WIDTH)}{value}")
    lines.append("")
    return lines


def build_banner() -> str:
    return "\n".join(
        [SEPARATOR, f"{static_config.PROJECT_TITLE} - Setup", SEPARATOR, ""]
    )


def print_banner() -> None:
    print(build_banner())


def build_summary(app_settings: AppSettings, completed: bool = True) -> str:
    """
    Return the summary text.

    Args:
        app_settings: The application settings.
        completed: True right after a successful run; False prints a
            neutral heading instead of "Setup Complete!".
    """
    summary = app_settings.summary
    if completed:
        heading = f"{app_settings.symbols.get('sparkles', '✨')} Setup Complete!"
    else:
        heading = f"{static_config.PROJECT_TITLE} - Services"
    commands = {
        label: command.replace(
            RUNTIME_PLACEHOLDER, app_settings.container_runtime_command
        )
        for label, command in summary.commands.items()
    }

    lines = ["", SEPARATOR, heading, SEPARATOR, ""]
    lines += _section("Services", summary.endpoints)
    lines += _section("Default Credentials", summary.credentials)
    lines += _section("Useful Commands", commands)
    if summary.note:
        lines.append(f"Note: {summary.note}")
        lines.append("")
    return "\n".join(lines)


def print_summary(app_settings: AppSettings, completed: bool = True) -> None:
    print(build_summary(app_settings, completed))
