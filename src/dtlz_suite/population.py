"""Population container consumed by the convergence metric.

Optimizers usually bring their own population type. Anything that satisfies
protocols.PopulationLike (a size and an ``x`` matrix) is accepted by the
metric; Population is the smallest such type for callers that have none.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Population:
    """Immutable matrix of member decision vectors.

    The matrix is copied on construction, so later edits to the caller's
    array do not change the population.

    Attributes:
        x: Decision vectors of all members in order, shape (n, dim).

    Example:
        >>> pop = Population(x=np.full((4, 7), 0.5))
        >>> len(pop), pop.n_vars
        (4, 7)
    """

    x: np.ndarray

    def __post_init__(self) -> None:
        """Check the matrix shape and take a private copy.

        Raises:
            TypeError: If x is not a numpy array.
            ValueError: If x is not two-dimensional.
        """
        if not isinstance(self.x, np.ndarray):
            raise TypeError(f"x must be a numpy array, got {type(self.x).__name__}")
        if self.x.ndim != 2:
            raise ValueError(f"x must be 2D (n, dim), got shape {self.x.shape}")
        object.__setattr__(self, "x", self.x.copy())

    def __len__(self) -> int:
        return self.x.shape[0]

    @property
    def n_vars(self) -> int:
        """Length of each member decision vector."""
        return self.x.shape[1]
