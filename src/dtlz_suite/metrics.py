"""Convergence metric (p-distance) for DTLZ problems.

Introduced by Martens and Izzo, this metric measures how far a decision vector
is from the Pareto-optimal front of a DTLZ problem analytically, without
sampling the front: it is the variant's distance function evaluated on the
tail block x_M, and it is 0 exactly on the optimal front.

- convergence_distance: metric of a single decision vector
- population_convergence: mean metric over a population

References:
    Martens, M., & Izzo, D. (2013). The asynchronous island model and NSGA-II:
    study of a new migration operator and its performance. Proceedings of the
    15th annual conference on Genetic and evolutionary computation (GECCO).
"""

from functools import partial

import numpy as np

from dtlz_suite.batch import lift, lift_parallel
from dtlz_suite.config import ProblemConfig
from dtlz_suite.exceptions import SizeMismatch
from dtlz_suite.protocols import PopulationLike
from dtlz_suite.variants import formulas_for


def convergence_distance(config: ProblemConfig, x: np.ndarray) -> float:
    """Distance of a decision vector from the optimal front (0 = on the front).

    Args:
        config: Problem configuration selecting the distance function.
        x: Decision vector. Shape (dim,).

    Returns:
        The distance function of the variant evaluated on x[n_obj-1:].

    Raises:
        SizeMismatch: If len(x) differs from config.dim.

    Examples:
        >>> cfg = ProblemConfig(variant=1, dim=5, n_obj=3)
        >>> convergence_distance(cfg, np.full(5, 0.5))
        0.0
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1 or x.shape[0] != config.dim:
        detected = x.shape[0] if x.ndim == 1 else x.shape
        raise SizeMismatch(f"The size of the decision vector should be {config.dim} while {detected} was detected")
    return formulas_for(config.variant).distance(x[config.n_obj - 1 :])


def population_convergence(
    config: ProblemConfig,
    population: PopulationLike | np.ndarray,
    n_workers: int | None = None,
) -> float:
    """Mean convergence distance over every member of a population.

    Args:
        config: Problem configuration selecting the distance function.
        population: A PopulationLike or a 2D array of shape (n, dim).
        n_workers: If given, member distances are computed with this many
            joblib workers (-1 for all cores). The result equals the serial one.

    Returns:
        Arithmetic mean of convergence_distance over the members.

    Raises:
        ValueError: If the population is empty, not two-dimensional, or its
            len() disagrees with the number of rows in x.
        SizeMismatch: If the members do not have length config.dim.
    """
    if isinstance(population, PopulationLike):
        size = len(population)
        x = np.asarray(population.x, dtype=np.float64)
    else:
        x = np.asarray(population, dtype=np.float64)
        size = x.shape[0] if x.ndim else 0
    if x.ndim != 2:
        raise ValueError(f"population must be 2D (n, dim), got shape {x.shape}")
    if size != x.shape[0]:
        raise ValueError(f"population reports {size} members but x holds {x.shape[0]} decision vectors")
    if size == 0:
        raise ValueError("population must contain at least one individual")

    distance = partial(convergence_distance, config)
    lifted = lift(distance) if n_workers is None else lift_parallel(distance, n_workers)
    return float(np.sum(lifted(x)) / size)
