"""Shared test fixtures for dtlz-suite tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- make_problem: Factory building DTLZ instances with test-friendly defaults
- optimal_x: Decision vectors placed on the optimal front of each variant
"""

import numpy as np
import pytest

from dtlz_suite import DTLZ

# Value every tail component takes on the optimal front
OPTIMAL_TAIL = {1: 0.5, 2: 0.5, 3: 0.5, 4: 0.5, 5: 0.5, 6: 0.0, 7: 0.0}


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def make_problem():
    """Factory for DTLZ problems defaulting to dim=7, n_obj=3."""

    def factory(variant: int = 1, dim: int = 7, n_obj: int = 3, skew_exponent: int = 100) -> DTLZ:
        return DTLZ(variant=variant, dim=dim, n_obj=n_obj, skew_exponent=skew_exponent)

    return factory


@pytest.fixture
def optimal_x(rng: np.random.Generator):
    """Build a decision vector with random position variables and an optimal tail.

    Returns a function (problem) -> np.ndarray.
    """

    def build(problem: DTLZ) -> np.ndarray:
        x = rng.uniform(0, 1, size=problem.dim)
        x[problem.n_obj - 1 :] = OPTIMAL_TAIL[problem.variant]
        return x

    return build
