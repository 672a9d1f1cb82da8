# stack_setup/steps/services.py
# -*- coding: utf-8 -*-
"""
Service steps: build and start the compose stack, wait, then migrate.
"""

import time

from common.command_utils import log_setup
from common.container_utils import compose
from stack_setup.base_step import BaseStep
from stack_setup.registry import StepRegistry


@StepRegistry.register(
    name="compose_build",
    metadata={
        "dependencies": ["backend_env", "frontend_config"],
        "description": "Building Docker images",
    },
)
class ComposeBuildStep(BaseStep):

    def run(self) -> None:
        compose(self.app_settings, ["build"], current_logger=self.logger)


@StepRegistry.register(
    name="compose_up",
    metadata={
        "dependencies": ["compose_build"],
        "description": "Starting Docker containers",
    },
)
class ComposeUpStep(BaseStep):

    def run(self) -> None:
        compose(self.app_settings, ["up", "-d"], current_logger=self.logger)


@StepRegistry.register(
    name="warmup",
    metadata={
        "dependencies": ["compose_up"],
        "description": "Waiting for services to be ready",
    },
)
class WarmupStep(BaseStep):
    """
    Sleep a fixed interval.

    This is not a readiness probe: if the database needs longer than
    `warmup_seconds`, the migration that follows fails and is not retried.
    """

    def run(self) -> None:
        seconds = self.app_settings.warmup_seconds
        log_setup(
            f"  {self.symbols.get('info', 'ℹ️')} Sleeping {seconds}s before migrating",
            "info",
            self.logger,
            self.app_settings,
        )
        time.sleep(seconds)


@StepRegistry.register(
    name="migrate",
    metadata={
        "dependencies": ["warmup"],
        "description": "Running database migrations",
    },
)
class MigrateStep(BaseStep):

    def run(self) -> None:
        backend = self.app_settings.backend
        compose(
            self.app_settings,
            ["exec", "-T", backend.service_name] + backend.migrate_command,
            current_logger=self.logger,
        )
