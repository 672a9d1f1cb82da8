"""
Smart Stock Management stack setup.

Brings the backend and frontend projects and their compose services from
an empty directory to a running, migrated stack.
"""

from stack_setup.config import SCRIPT_VERSION

__version__ = SCRIPT_VERSION
