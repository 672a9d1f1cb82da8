# stack_setup/steps/backend.py
# -*- coding: utf-8 -*-
"""
Backend steps: create the framework project, open up its writable
directories and point its .env at the compose services.
"""

from typing import Dict, List, Optional, Tuple

from common.command_utils import log_setup
from common.container_utils import run_in_container, write_file_via_container
from common.env_file import (
    get_env_value,
    quote_env_value,
    substitute_lines,
    upsert_env_block,
)
from common.file_utils import read_text_file, relax_permissions
from stack_setup import config as static_config
from stack_setup.base_step import BaseStep
from stack_setup.config_models import AppSettings
from stack_setup.registry import StepRegistry


def backend_env_substitutions(app_settings: AppSettings) -> List[Tuple[str, str]]:
    """
    Substitutions turning the framework's local defaults into the compose
    topology, in the order they must be applied.

    The commented variants come before the plain ones so that both a fresh
    skeleton (keys commented out) and an edited one end up with the same
    active line.
    """
    db = app_settings.database
    return [
        ("DB_CONNECTION=sqlite", f"DB_CONNECTION={db.connection}"),
        ("# DB_HOST=127.0.0.1", f"DB_HOST={db.host}"),
        ("DB_HOST=127.0.0.1", f"DB_HOST={db.host}"),
        ("# DB_PORT=3306", f"DB_PORT={db.port}"),
        ("DB_PORT=3306", f"DB_PORT={db.port}"),
        ("# DB_DATABASE=laravel", f"DB_DATABASE={db.database}"),
        ("# DB_USERNAME=root", f"DB_USERNAME={db.username}"),
        ("DB_USERNAME=root", f"DB_USERNAME={db.username}"),
        ("# DB_PASSWORD=", f"DB_PASSWORD={db.password}"),
        ("REDIS_HOST=127.0.0.1", f"REDIS_HOST={app_settings.cache.host}"),
        ("APP_NAME=Laravel", f"APP_NAME={quote_env_value(app_settings.backend.app_name)}"),
    ]


def search_env_values(app_settings: AppSettings) -> Dict[str, str]:
    search = app_settings.search
    return {
        "ELASTICSEARCH_HOST": search.host,
        "ELASTICSEARCH_PORT": str(search.port),
        "SCOUT_DRIVER": search.scout_driver,
    }


def managed_env_keys(app_settings: AppSettings) -> List[str]:
    """Keys the backend .env rewrite sets, in the order it sets them."""
    keys = [new.split("=", 1)[0] for _old, new in backend_env_substitutions(app_settings)]
    keys.extend(search_env_values(app_settings))
    return list(dict.fromkeys(keys))


def render_backend_env(content: str, app_settings: AppSettings) -> str:
    """Return the backend .env content rewritten for the compose services."""
    rewritten = substitute_lines(content, backend_env_substitutions(app_settings))
    return upsert_env_block(
        rewritten,
        search_env_values(app_settings),
        header=static_config.SEARCH_ENV_HEADER,
    )


@StepRegistry.register(
    name="backend_project",
    metadata={
        "dependencies": [],
        "description": "Creating Laravel backend project",
    },
)
class BackendProjectStep(BaseStep):
    """Create the backend skeleton with the package-manager image."""

    def skip_reason(self) -> Optional[str]:
        if self.app_settings.backend_path.exists():
            return "Backend directory already exists"
        return None

    def run(self) -> None:
        backend = self.app_settings.backend
        run_in_container(
            self.app_settings,
            backend.composer_image,
            self.app_settings.project_dir,
            ["create-project", backend.framework_package, backend.directory],
            current_logger=self.logger,
        )


@StepRegistry.register(
    name="backend_permissions",
    metadata={
        "dependencies": ["backend_project"],
        "description": "Fixing backend directory permissions",
    },
)
class BackendPermissionsStep(BaseStep):
    """Relax permissions on the backend tree and its writable directories."""

    def skip_reason(self) -> Optional[str]:
        if not self.app_settings.backend_path.is_dir():
            return "Backend directory not found"
        return None

    def run(self) -> None:
        backend = self.app_settings.backend
        backend_path = self.app_settings.backend_path
        relax_permissions(
            [backend_path],
            backend.directory_mode,
            self.app_settings,
            self.logger,
        )
        relax_permissions(
            [backend_path / sub for sub in backend.writable_directories],
            backend.writable_mode,
            self.app_settings,
            self.logger,
        )


@StepRegistry.register(
    name="backend_env",
    metadata={
        "dependencies": ["backend_permissions"],
        "description": "Configuring backend .env for PostgreSQL",
    },
)
class BackendEnvStep(BaseStep):
    """
    Rewrite the managed keys of the backend .env on every run.

    A file that already holds the rendered values is left untouched.
    """

    def skip_reason(self) -> Optional[str]:
        env_path = self.app_settings.backend_path / static_config.BACKEND_ENV_FILE
        if not env_path.is_file():
            return f"{env_path} not found"
        return None

    def run(self) -> None:
        env_path = self.app_settings.backend_path / static_config.BACKEND_ENV_FILE
        original = read_text_file(env_path)
        rewritten = render_backend_env(original, self.app_settings)
        if rewritten == original:
            log_setup(
                f"  {self.symbols.get('info', 'ℹ️')} {env_path} already up to date",
                "info",
                self.logger,
                self.app_settings,
            )
            return

        changed = [
            key for key in managed_env_keys(self.app_settings)
            if get_env_value(original, key) != get_env_value(rewritten, key)
        ]
        if changed:
            log_setup(
                f"  {self.symbols.get('info', 'ℹ️')} Setting {', '.join(changed)} in {env_path}",
                "info",
                self.logger,
                self.app_settings,
            )
        write_file_via_container(
            self.app_settings,
            self.app_settings.backend_path,
            static_config.BACKEND_ENV_FILE,
            rewritten,
            current_logger=self.logger,
        )
