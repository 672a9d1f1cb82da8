"""
Orchestrator for the stack setup.

The SetupOrchestrator checks the container runtime, resolves the requested
steps into run order and executes them one by one, stopping at the first
failure. Nothing already applied is rolled back.
"""

import importlib
import logging
from typing import Dict, List, Optional, Type

from common.command_utils import log_setup
from common.container_utils import compose, ensure_container_runtime
from stack_setup.base_step import BaseStep
from stack_setup.config_models import AppSettings
from stack_setup.registry import StepRegistry
from stack_setup.step_executor import execute_step
from stack_setup.summary import print_banner, print_summary


class SetupOrchestrator:
    """
    Runs setup steps in dependency order.
    """

    def __init__(
        self,
        app_settings: AppSettings,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            app_settings: The application settings.
            logger: Optional logger instance. If not provided, a new logger will be created.
        """
        self.app_settings = app_settings
        self.logger = logger or logging.getLogger(self.__class__.__name__)

        # Registers every step with the StepRegistry
        importlib.import_module("stack_setup.steps")

    def get_available_steps(self) -> Dict[str, Type[BaseStep]]:
        return StepRegistry.get_all_steps()

    def resolve_steps(
        self,
        step_names: Optional[List[str]] = None,
        with_dependencies: bool = True,
    ) -> List[str]:
        """
        Turn the requested step names into run order.

        Args:
            step_names: Steps to run; None means all registered steps.
            with_dependencies: Pull in the dependencies of the requested steps.

        Raises:
            KeyError: If a step name is unknown.
            ValueError: If the dependencies form a cycle.
        """
        if step_names is None:
            step_names = list(StepRegistry.get_all_steps())
        if with_dependencies:
            return StepRegistry.resolve_dependencies(step_names)

        for name in step_names:
            StepRegistry.get_step(name)
        order = list(StepRegistry.get_all_steps())
        return sorted(dict.fromkeys(step_names), key=order.index)

    def run(
        self,
        step_names: Optional[List[str]] = None,
        with_dependencies: bool = True,
    ) -> bool:
        """
        Run the setup.

        Raises:
            ContainerRuntimeUnavailableError: Before any step runs, if the
                container runtime does not respond.

        Returns:
            True if every step succeeded or was skipped, False at the first
            failure.
        """
        symbols = self.app_settings.symbols
        print_banner()
        ensure_container_runtime(self.app_settings, self.logger)

        resolved = self.resolve_steps(step_names, with_dependencies)
        self.logger.info(f"Running steps in order: {', '.join(resolved)}")

        for index, name in enumerate(resolved, start=1):
            step = StepRegistry.get_step(name)(self.app_settings, self.logger)
            self.logger.info(f"Step {index}/{len(resolved)}")
            if not execute_step(step, self.logger):
                log_setup(
                    f"{symbols.get('critical', '🔥')} Setup aborted at step '{name}'. "
                    "Steps already applied are left in place.",
                    "critical",
                    self.logger,
                    self.app_settings,
                )
                return False

        print_summary(self.app_settings)
        return True

    def follow_logs(self, service: Optional[str] = None) -> None:
        args = ["logs", "-f"]
        if service:
            args.append(service)
        compose(self.app_settings, args, current_logger=self.logger)

    def stop_services(self) -> None:
        compose(self.app_settings, ["down"], current_logger=self.logger)
