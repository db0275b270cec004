"""Registry of problem factories for host optimization frameworks.

Host frameworks discover problems by name instead of importing their classes.
A factory is registered under a string key and called with keyword arguments
when a problem is requested, so experiments can be driven from configuration:

    ```python
    from dtlz_suite.registry import ProblemRegistry, list_problems

    problem = ProblemRegistry.get("dtlz2", dim=12, n_obj=3)
    available = list_problems()  # ["dtlz1", ..., "dtlz7"]
    ```

The seven DTLZ problems are registered when dtlz_suite is imported. Every
call to get() returns a new instance; problems also expose clone() for
frameworks that copy a configured instance instead.
"""

import logging
from collections.abc import Callable

from dtlz_suite.protocols import Problem

logger = logging.getLogger(__name__)


class ProblemRegistry:
    """Registry for problem factories.

    Class Attributes:
        _registry: Dictionary mapping problem names to factory functions.
            Values are callables that accept keyword arguments and return
            objects satisfying the Problem protocol.

    Example:
        ```python
        def my_dtlz4(dim: int = 12, n_obj: int = 3):
            return DTLZ(variant=4, dim=dim, n_obj=n_obj, skew_exponent=50)

        ProblemRegistry.register("dtlz4-mild", my_dtlz4)
        problem = ProblemRegistry.get("dtlz4-mild", n_obj=5)
        ```
    """

    _registry: dict[str, Callable[..., Problem]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., Problem]) -> None:
        """Register a problem factory.

        Args:
            name: Unique name for the problem. Will overwrite if already exists.
            factory: Callable returning a Problem. Should accept keyword
                arguments for configuration.
        """
        action = "Overwriting" if name in cls._registry else "Registering"
        logger.debug("%s problem factory '%s'", action, name)
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> Problem:
        """Create a configured problem by name.

        Args:
            name: Name of the registered problem.
            **kwargs: Configuration parameters passed to the factory.

        Returns:
            A new problem instance.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available problems.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Problem '{name}' not found. Available problems: {available}")
        return cls._registry[name](**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted list of registered problem names."""
        return sorted(cls._registry.keys())


def list_problems() -> list[str]:
    """List all registered problems.

    Convenience function that returns ProblemRegistry.list().
    """
    return ProblemRegistry.list()
