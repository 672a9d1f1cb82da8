# stack_setup/steps/frontend.py
# -*- coding: utf-8 -*-
"""
Frontend steps: scaffold the Vite/React app, install its packages,
initialize Tailwind CSS and write the generated configuration files.
"""

from typing import Dict, Optional

from common.container_utils import run_shell_in_container, write_file_via_container
from stack_setup import config as static_config
from stack_setup.base_step import BaseStep
from stack_setup.config_models import AppSettings
from stack_setup.registry import StepRegistry


def render_frontend_env(app_settings: AppSettings) -> str:
    return f"VITE_API_URL={app_settings.frontend.api_url}\n"


def frontend_files(app_settings: AppSettings) -> Dict[str, str]:
    """Relative path to content of every file the frontend_config step overwrites."""
    return {
        static_config.FRONTEND_ENV_FILE: render_frontend_env(app_settings),
        static_config.TAILWIND_CONFIG_FILE: static_config.TAILWIND_CONFIG_TEMPLATE,
        static_config.INDEX_CSS_FILE: static_config.INDEX_CSS_TEMPLATE,
    }


class _FrontendDirectoryStep(BaseStep):
    """Steps that only make sense once the frontend project exists."""

    def skip_reason(self) -> Optional[str]:
        if not self.app_settings.frontend_path.is_dir():
            return "Frontend directory not found"
        return None


@StepRegistry.register(
    name="frontend_project",
    metadata={
        "dependencies": [],
        "description": "Creating React frontend project",
    },
)
class FrontendProjectStep(BaseStep):
    """Scaffold the frontend with Vite."""

    def skip_reason(self) -> Optional[str]:
        if self.app_settings.frontend_path.exists():
            return "Frontend directory already exists"
        return None

    def run(self) -> None:
        frontend = self.app_settings.frontend
        run_shell_in_container(
            self.app_settings,
            frontend.node_image,
            self.app_settings.project_dir,
            [[
                "npm", "create", "vite@latest", frontend.directory,
                "--", "--template", frontend.template,
            ]],
            current_logger=self.logger,
        )


@StepRegistry.register(
    name="frontend_dependencies",
    metadata={
        "dependencies": ["frontend_project"],
        "description": "Installing frontend dependencies",
    },
)
class FrontendDependenciesStep(_FrontendDirectoryStep):
    """npm install, then the CSS toolchain, then routing and data-fetching libraries."""

    def run(self) -> None:
        frontend = self.app_settings.frontend
        commands = [["npm", "install"]]
        if frontend.dev_dependencies:
            commands.append(["npm", "install", "-D"] + frontend.dev_dependencies)
        if frontend.dependencies:
            commands.append(["npm", "install"] + frontend.dependencies)
        run_shell_in_container(
            self.app_settings,
            frontend.node_image,
            self.app_settings.frontend_path,
            commands,
            current_logger=self.logger,
        )


@StepRegistry.register(
    name="tailwind_init",
    metadata={
        "dependencies": ["frontend_dependencies"],
        "description": "Initializing Tailwind CSS",
    },
)
class TailwindInitStep(_FrontendDirectoryStep):

    def run(self) -> None:
        run_shell_in_container(
            self.app_settings,
            self.app_settings.frontend.node_image,
            self.app_settings.frontend_path,
            [["npx", "tailwindcss", "init", "-p"]],
            current_logger=self.logger,
        )


@StepRegistry.register(
    name="frontend_config",
    metadata={
        "dependencies": ["tailwind_init"],
        "description": "Configuring frontend",
    },
)
class FrontendConfigStep(BaseStep):
    """
    Overwrite the frontend .env, Tailwind config and global stylesheet.

    Runs on every invocation; manual edits to these files are lost.
    """

    def run(self) -> None:
        for relative_path, content in frontend_files(self.app_settings).items():
            write_file_via_container(
                self.app_settings,
                self.app_settings.frontend_path,
                relative_path,
                content,
                current_logger=self.logger,
            )
