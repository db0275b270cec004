"""The DTLZ problem: fitness evaluation and the host-facing surface.

All problems of the suite are box-constrained continuous problems in [0, 1]^dim,
scalable in the number of objectives. The decision vector splits into

    x[0], ..., x[n_obj-2]          position block, shapes the objective vector
    x[n_obj-1], ..., x[dim-1]      distance block x_M, drives g

Evaluating a vector computes g on x_M and then applies the variant's shape
function (see variants.py for the pairing). The problem holds nothing but its
immutable ProblemConfig, so instances can be shared freely between threads.
"""

import logging

import numpy as np

from dtlz_suite.batch import lift
from dtlz_suite.config import ProblemConfig
from dtlz_suite.metrics import convergence_distance, population_convergence
from dtlz_suite.protocols import PopulationLike
from dtlz_suite.variants import Formulas, formulas_for

logger = logging.getLogger(__name__)


class DTLZ:
    """A problem of the DTLZ test suite.

    Args:
        variant: Problem id in [1, 7].
        dim: Decision vector length, larger than n_obj.
        n_obj: Number of objectives, at least 2.
        skew_exponent: Density bias exponent, only used by DTLZ4.

    Raises:
        InvalidConfiguration: If any parameter is out of range.

    Example:
        >>> problem = DTLZ(variant=1, dim=5, n_obj=3)
        >>> problem.evaluate(np.full(5, 0.5))
        array([0.125, 0.125, 0.25 ])
        >>> problem.name
        'DTLZ1'
    """

    def __init__(self, variant: int = 1, dim: int = 7, n_obj: int = 3, skew_exponent: int = 100) -> None:
        self._config = ProblemConfig(variant=variant, dim=dim, n_obj=n_obj, skew_exponent=skew_exponent)
        self._formulas: Formulas = formulas_for(self._config.variant)
        logger.debug("Constructed %r", self)

    @classmethod
    def from_config(cls, config: ProblemConfig) -> "DTLZ":
        """Build a problem from an existing configuration."""
        return cls(*config.astuple())

    @classmethod
    def from_state(cls, state: tuple[int, int, int, int]) -> "DTLZ":
        """Rebuild a problem from its persisted (variant, dim, n_obj, skew_exponent) state."""
        return cls.from_config(ProblemConfig.from_state(state))

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> "DTLZ":
        """Rebuild a problem from the mapping produced by to_dict()."""
        return cls.from_config(ProblemConfig.from_dict(data))

    # Configuration accessors

    @property
    def config(self) -> ProblemConfig:
        return self._config

    @property
    def variant(self) -> int:
        return self._config.variant

    @property
    def dim(self) -> int:
        return self._config.dim

    @property
    def n_obj(self) -> int:
        return self._config.n_obj

    @property
    def skew_exponent(self) -> int:
        return self._config.skew_exponent

    @property
    def name(self) -> str:
        """Problem name, "DTLZ" followed by the variant id."""
        return f"DTLZ{self._config.variant}"

    def get_nobj(self) -> int:
        return self._config.n_obj

    def get_name(self) -> str:
        return self.name

    def get_bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the box bounds of the decision vector.

        Returns:
            Tuple (lower, upper) of freshly allocated arrays of shape (dim,),
            filled with 0.0 and 1.0.
        """
        return np.zeros(self._config.dim), np.ones(self._config.dim)

    # Evaluation

    def evaluate(self, x: np.ndarray) -> np.ndarray:
        """Compute the fitness vector of a decision vector.

        The length of x is not checked; callers are expected to pass vectors
        of length dim. Values outside [0, 1] are evaluated as given.

        Args:
            x: Decision vector. Shape (dim,).

        Returns:
            Newly allocated objective vector of shape (n_obj,).
        """
        x = np.asarray(x, dtype=np.float64)
        n_obj = self._config.n_obj
        distance, shape, g_offset = self._formulas
        g = g_offset + distance(x[n_obj - 1 :])
        return shape(x, g, n_obj, self._config.skew_exponent)

    def evaluate_population(self, x: np.ndarray) -> np.ndarray:
        """Compute the fitness of every row of a (n, dim) matrix.

        Returns:
            Objective matrix of shape (n, n_obj).
        """
        return lift(self.evaluate)(np.asarray(x, dtype=np.float64))

    def distance_to_front(
        self, target: np.ndarray | PopulationLike, n_workers: int | None = None
    ) -> float:
        """Convergence metric of a decision vector or a population (0 = on the front).

        Args:
            target: A decision vector of shape (dim,), a matrix of decision
                vectors of shape (n, dim), or a PopulationLike.
            n_workers: Parallel workers for the population case, see
                metrics.population_convergence.

        Returns:
            The distance of the vector, or the mean distance over the population.

        Raises:
            SizeMismatch: If a decision vector does not have length dim.
            ValueError: If a population is empty.
        """
        if isinstance(target, PopulationLike) or np.ndim(target) == 2:
            return population_convergence(self._config, target, n_workers=n_workers)
        return convergence_distance(self._config, target)

    p_distance = distance_to_front

    # Cloning and persistence

    def clone(self) -> "DTLZ":
        """Return an independent problem with the same configuration."""
        return type(self).from_config(self._config)

    def astuple(self) -> tuple[int, int, int, int]:
        """Return the persisted state (variant, dim, n_obj, skew_exponent)."""
        return self._config.astuple()

    def to_dict(self) -> dict[str, int]:
        return self._config.to_dict()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DTLZ):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    def __repr__(self) -> str:
        cfg = self._config
        return (
            f"{type(self).__name__}(variant={cfg.variant}, dim={cfg.dim}, "
            f"n_obj={cfg.n_obj}, skew_exponent={cfg.skew_exponent})"
        )


def dtlz_factory(variant: int):
    """Create a registry factory that builds one fixed DTLZ variant.

    The variant is bound here; the factory only accepts the remaining
    configuration, so a registry lookup cannot switch to another variant.

    Returns:
        A callable (dim=7, n_obj=3, skew_exponent=100) -> DTLZ.

    Example:
        >>> factory = dtlz_factory(4)
        >>> factory(dim=12, n_obj=3).name
        'DTLZ4'
    """
    variant = int(variant)

    def factory(dim: int = 7, n_obj: int = 3, skew_exponent: int = 100) -> DTLZ:
        return DTLZ(variant=variant, dim=dim, n_obj=n_obj, skew_exponent=skew_exponent)

    return factory
