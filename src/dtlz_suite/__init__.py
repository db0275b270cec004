"""dtlz-suite: the DTLZ scalable multi-objective test problems.

A pure numpy implementation of the seven DTLZ benchmark problems (Deb, Thiele,
Laumanns, Zitzler) with an analytic convergence metric that is 0 exactly on
the Pareto-optimal front.

Example:
    >>> from dtlz_suite import DTLZ
    >>> import numpy as np
    >>> problem = DTLZ(variant=1, dim=5, n_obj=3)
    >>> problem.evaluate(np.full(5, 0.5))
    array([0.125, 0.125, 0.25 ])
    >>> problem.distance_to_front(np.full(5, 0.5))
    0.0

Example (registry lookup):
    >>> from dtlz_suite import ProblemRegistry
    >>> problem = ProblemRegistry.get("dtlz7", dim=22, n_obj=3)
    >>> problem.name
    'DTLZ7'
"""

from dtlz_suite.batch import lift, lift_parallel
from dtlz_suite.config import ProblemConfig
from dtlz_suite.distance import g6, g7, g13, g245
from dtlz_suite.exceptions import InvalidConfiguration, SizeMismatch
from dtlz_suite.metrics import convergence_distance, population_convergence
from dtlz_suite.population import Population
from dtlz_suite.problem import DTLZ, dtlz_factory
from dtlz_suite.protocols import PopulationLike, Problem
from dtlz_suite.registry import ProblemRegistry, list_problems
from dtlz_suite.shapes import (
    curve_front,
    disconnected_front,
    linear_front,
    skewed_spherical_front,
    spherical_front,
)
from dtlz_suite.variants import FORMULAS, Formulas, Variant, formulas_for

# Register built-in problems
for _variant in Variant:
    ProblemRegistry.register(_variant.name.lower(), dtlz_factory(_variant))
del _variant

__all__ = [
    # Problem
    "DTLZ",
    "dtlz_factory",
    "ProblemConfig",
    "Variant",
    # Distance functions
    "g13",
    "g245",
    "g6",
    "g7",
    # Shape functions
    "linear_front",
    "spherical_front",
    "skewed_spherical_front",
    "curve_front",
    "disconnected_front",
    # Dispatch
    "Formulas",
    "FORMULAS",
    "formulas_for",
    # Convergence metric
    "convergence_distance",
    "population_convergence",
    # Population evaluation
    "lift",
    "lift_parallel",
    # Registry system
    "ProblemRegistry",
    "list_problems",
    # Data structures and protocols
    "Population",
    "PopulationLike",
    "Problem",
    # Errors
    "InvalidConfiguration",
    "SizeMismatch",
]
