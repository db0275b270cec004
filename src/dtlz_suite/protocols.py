"""Protocol definitions for the boundary with host optimization frameworks.

The problem core does not know which optimizer drives it. Two narrow
protocols describe everything either side needs from the other:

1. **Problem**: what a host framework or ProblemRegistry consumer may call on a
   problem instance (name, clone, evaluate, bounds).
2. **PopulationLike**: what the convergence metric needs from a population
   (its size and the ordered matrix of member decision vectors).

Example usage:
    ```python
    def run(problem: Problem, population: PopulationLike) -> float:
        lower, upper = problem.get_bounds()
        fitness = [problem.evaluate(x) for x in population.x]
        ...
    ```
"""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Problem(Protocol):
    """Capability interface of a multi-objective test problem.

    Host frameworks store objects satisfying this protocol and clone them to
    hand independent copies to workers or islands.

    Example:
        ```python
        from dtlz_suite import DTLZ

        problem = DTLZ(variant=2)
        assert isinstance(problem, Problem)
        copy = problem.clone()
        ```
    """

    @property
    def name(self) -> str:
        """Human readable problem name, e.g. "DTLZ2"."""
        ...

    def clone(self) -> "Problem":
        """Return an independent, equivalent problem instance."""
        ...

    def evaluate(self, x: np.ndarray) -> np.ndarray:
        """Return the fitness vector of one decision vector."""
        ...

    def get_bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (lower, upper) box bounds of the decision vector."""
        ...


@runtime_checkable
class PopulationLike(Protocol):
    """Minimal population view: a size and a (n, dim) matrix of decision vectors.

    Attributes:
        x: Decision vectors of all members in order, shape (n, dim).
    """

    x: np.ndarray

    def __len__(self) -> int: ...
