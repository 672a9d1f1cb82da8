"""
Registry for setup steps.

This module provides a registry for setup steps to register themselves
and a decorator for registering step classes.
"""

from typing import Any, Dict, List, Optional, Set, Type

from stack_setup.base_step import BaseStep


class StepRegistry:
    """
    Registry for setup steps.

    Steps are kept in registration order, which is the order a full run
    uses whenever dependencies leave a choice.
    """

    _registry: Dict[str, Type[BaseStep]] = {}

    @classmethod
    def register(cls, name: str, metadata: Optional[Dict[str, Any]] = None):
        """
        Decorator for registering step classes.

        Args:
            name: The name of the step.
            metadata: Optional metadata for the step: its dependencies and a
                      description.

        Returns:
            A decorator function that registers the step class.
        """

        def decorator(step_class: Type[BaseStep]) -> Type[BaseStep]:
            if name in cls._registry:
                raise ValueError(f"Step with name '{name}' already registered")

            if metadata:
                step_class.metadata = metadata
            step_class.name = name

            cls._registry[name] = step_class
            return step_class

        return decorator

    @classmethod
    def get_step(cls, name: str) -> Type[BaseStep]:
        """
        Get a step class by name.

        Raises:
            KeyError: If no step with the given name is registered.
        """
        if name not in cls._registry:
            raise KeyError(f"No step registered with name '{name}'")
        return cls._registry[name]

    @classmethod
    def get_all_steps(cls) -> Dict[str, Type[BaseStep]]:
        """Return a copy of the registry, in registration order."""
        return cls._registry.copy()

    @classmethod
    def get_step_dependencies(cls, name: str) -> Set[str]:
        step_class = cls.get_step(name)
        metadata = getattr(step_class, "metadata", {})
        return set(metadata.get("dependencies", []))

    @classmethod
    def resolve_dependencies(cls, steps: List[str]) -> List[str]:
        """
        Resolve dependencies for a list of steps.

        Args:
            steps: A list of step names.

        Returns:
            A list of step names in the order they should run; every step
            comes after its dependencies.

        Raises:
            KeyError: If any of the steps or their dependencies are not registered.
            ValueError: If there is a circular dependency.
        """
        order = list(cls._registry)
        result: List[str] = []
        visited: Set[str] = set()
        temp_visited: Set[str] = set()

        def visit(step: str):
            if step in temp_visited:
                raise ValueError(
                    f"Circular dependency detected involving '{step}'"
                )

            if step in visited:
                return

            temp_visited.add(step)

            # Sets have no stable order; follow registration order instead
            dependencies = cls.get_step_dependencies(step)
            for dependency in sorted(
                dependencies,
                key=lambda d: order.index(d) if d in order else len(order),
            ):
                visit(dependency)

            temp_visited.remove(step)
            visited.add(step)
            result.append(step)

        for step in steps:
            if step not in visited:
                visit(step)

        return result
