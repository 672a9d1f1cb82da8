"""
Setup steps.

Importing this package registers every step with the StepRegistry. The
import order below is the order of a full run.
"""

from stack_setup.steps import backend, frontend, services  # noqa: F401
