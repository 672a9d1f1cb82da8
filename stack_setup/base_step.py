"""
Base step class for all setup steps.

This module provides the base class that every bootstrap step must inherit
from. It defines the common interface the orchestrator relies on.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from stack_setup.config_models import AppSettings


class BaseStep(ABC):
    """
    Base class for all setup steps.

    A step performs one side effect of the bootstrap sequence. Steps guarded
    by a precondition report it through `skip_reason`; steps without one
    run on every invocation.
    """

    # Overridden per subclass by the registry decorator
    metadata: Dict[str, Any] = {
        "dependencies": [],  # Names of steps that must run first
        "description": "",
    }

    # Set by the registry decorator
    name: str = ""

    def __init__(
        self,
        app_settings: AppSettings,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the step.

        Args:
            app_settings: The application settings.
            logger: Optional logger instance. If not provided, a new logger will be created.
        """
        self.app_settings = app_settings
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.symbols = app_settings.symbols

    @abstractmethod
    def run(self) -> Optional[bool]:
        """
        Perform the step.

        Returns:
            False to signal failure. None or True mean success. Exceptions
            are failures too.
        """
        pass

    def skip_reason(self) -> Optional[str]:
        """
        Return why the step is a no-op this time, or None to run it.

        The default runs unconditionally.
        """
        return None

    def get_description(self) -> str:
        return str(self.metadata.get("description", ""))
