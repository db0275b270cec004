"""Distance functions (g) of the DTLZ test suite.

Each function takes the distance block x_M of a decision vector (the last
dim - n_obj + 1 variables) and returns a non-negative scalar that is 0 exactly
when every component of x_M sits at its optimum:

- g13: multimodal Rastrigin-like distance (DTLZ1, DTLZ3), optimum at 0.5
- g245: sphere distance (DTLZ2, DTLZ4, DTLZ5), optimum at 0.5
- g6: power distance (DTLZ6), optimum at 0
- g7: linear distance (DTLZ7), optimum at 0

References:
    Deb, K., Thiele, L., Laumanns, M., & Zitzler, E. (2005). Scalable test
    problems for evolutionary multiobjective optimization. In Evolutionary
    Multiobjective Optimization (pp. 105-145). Springer.
"""

import numpy as np


def g13(x_m: np.ndarray) -> float:
    """Rastrigin-style distance used by DTLZ1 and DTLZ3.

    g = 100 * (|x_M| + sum((x_i - 0.5)^2 - cos(20 pi (x_i - 0.5))))

    The cosine term creates 11^|x_M| - 1 local optima in [0, 1]^|x_M|.

    Args:
        x_m: Distance block of the decision vector. Shape (k,).

    Returns:
        Distance value, 0 when all x_i = 0.5.

    Examples:
        >>> g13(np.full(5, 0.5))
        0.0
    """
    shifted = x_m - 0.5
    return float(100.0 * (x_m.shape[0] + np.sum(shifted**2 - np.cos(20.0 * np.pi * shifted))))


def g245(x_m: np.ndarray) -> float:
    """Sphere distance used by DTLZ2, DTLZ4 and DTLZ5.

    Args:
        x_m: Distance block of the decision vector. Shape (k,).

    Returns:
        sum((x_i - 0.5)^2), 0 when all x_i = 0.5.
    """
    return float(np.sum((x_m - 0.5) ** 2))


def g6(x_m: np.ndarray) -> float:
    """Power distance used by DTLZ6: sum(x_i^0.1), 0 when all x_i = 0."""
    return float(np.sum(x_m**0.1))


def g7(x_m: np.ndarray) -> float:
    """Linear distance used by DTLZ7.

    The published definition is 1 + 9/|x_M| * sum(x_i). The leading 1 is left
    out so the minimum is 0, like every other distance function here. DTLZ7
    adds it back before shaping its objectives.

    Args:
        x_m: Distance block of the decision vector. Shape (k,).

    Returns:
        9/|x_M| * sum(x_i), 0 when all x_i = 0.
    """
    return float(9.0 / x_m.shape[0] * np.sum(x_m))
