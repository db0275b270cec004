"""Shape functions of the DTLZ test suite.

A shape function turns the position variables x[0 .. n_obj-2] and a distance
value g into the objective vector. The shape decides the geometry of the
Pareto-optimal front, which is reached when g = 0:

- linear_front: hyperplane sum(f) = 0.5 (DTLZ1)
- spherical_front: unit sphere sum(f^2) = 1 (DTLZ2, DTLZ3)
- skewed_spherical_front: unit sphere, density biased to the boundary (DTLZ4)
- curve_front: one-dimensional curve on the unit sphere (DTLZ5, DTLZ6)
- disconnected_front: 2^(n_obj-1) disconnected regions (DTLZ7)

All shape functions share the signature

    shape(x, g, n_obj, skew_exponent) -> np.ndarray of shape (n_obj,)

where x is the whole decision vector. Inputs are not clipped to [0, 1].
"""

import numpy as np

HALF_PI: float = np.pi / 2.0


def _recursive_front(scale: float, head: np.ndarray, closing: np.ndarray, n_obj: int) -> np.ndarray:
    """Assemble the product/complement recursion shared by DTLZ1-DTLZ6.

    f[0]   = scale * head[0] * ... * head[M-2]
    f[i]   = scale * head[0] * ... * head[M-2-i] * closing[M-1-i]    for 1 <= i <= M-2
    f[M-1] = scale * closing[0]
    """
    # prefix[j] = product of the first j head factors
    prefix = np.concatenate(([1.0], np.cumprod(head[: n_obj - 1])))
    tail = np.concatenate(([1.0], closing[n_obj - 2 :: -1]))
    return scale * prefix[::-1] * tail


def linear_front(x: np.ndarray, g: float, n_obj: int, skew_exponent: int = 1) -> np.ndarray:
    """DTLZ1 shape: linear Pareto front on the hyperplane sum(f) = 0.5.

    Args:
        x: Decision vector. Only x[0 .. n_obj-2] are read.
        g: Distance value.
        n_obj: Number of objectives.
        skew_exponent: Unused, accepted for a uniform signature.

    Returns:
        Objective vector of shape (n_obj,).

    Examples:
        >>> linear_front(np.full(5, 0.5), 0.0, 3)
        array([0.125, 0.125, 0.25 ])
    """
    x = np.asarray(x, dtype=np.float64)
    head = x[: n_obj - 1]
    return _recursive_front(0.5 * (1.0 + g), head, 1.0 - head, n_obj)


def spherical_front(x: np.ndarray, g: float, n_obj: int, skew_exponent: int = 1) -> np.ndarray:
    """DTLZ2/DTLZ3 shape: spherical Pareto front sum(f^2) = 1.

    Args:
        x: Decision vector. Only x[0 .. n_obj-2] are read.
        g: Distance value.
        n_obj: Number of objectives.
        skew_exponent: Unused, accepted for a uniform signature.

    Returns:
        Objective vector of shape (n_obj,).
    """
    x = np.asarray(x, dtype=np.float64)
    angles = x[: n_obj - 1] * HALF_PI
    return _recursive_front(1.0 + g, np.cos(angles), np.sin(angles), n_obj)


def skewed_spherical_front(x: np.ndarray, g: float, n_obj: int, skew_exponent: int = 100) -> np.ndarray:
    """DTLZ4 shape: spherical front with every position variable raised to skew_exponent.

    A large exponent maps most of [0, 1] close to 0, so uniformly sampled
    solutions crowd near the f_M / f_1 plane.
    """
    x = np.asarray(x, dtype=np.float64)
    return spherical_front(x[: n_obj - 1] ** skew_exponent, g, n_obj)


def curve_front(x: np.ndarray, g: float, n_obj: int, skew_exponent: int = 1) -> np.ndarray:
    """DTLZ5/DTLZ6 shape: degenerate one-dimensional Pareto curve.

    The position variables are mapped to meta-angles

        theta[0] = x[0]
        theta[i] = 1 / (2 (1 + g)) + g x[i] / (1 + g)    for i >= 1

    and the spherical recursion is applied to theta. At g = 0 every theta[i]
    with i >= 1 collapses to 0.5, leaving x[0] as the only free coordinate.

    Args:
        x: Decision vector. Only x[0 .. n_obj-2] are read.
        g: Distance value.
        n_obj: Number of objectives.
        skew_exponent: Unused, accepted for a uniform signature.

    Returns:
        Objective vector of shape (n_obj,).
    """
    x = np.asarray(x, dtype=np.float64)
    t = 1.0 / (2.0 * (1.0 + g))
    theta = t + (g * x[: n_obj - 1]) / (1.0 + g)
    theta[0] = x[0]
    return spherical_front(theta, g, n_obj)


def disconnected_front(x: np.ndarray, g: float, n_obj: int, skew_exponent: int = 1) -> np.ndarray:
    """DTLZ7 shape: Pareto front made of disconnected regions.

    f[i] = x[i] for i < M-1 and f[M-1] = (1 + g) * h with

        h = M - sum_{i < M-1} f[i] / (1 + g) * (1 + sin(3 pi f[i]))

    Args:
        x: Decision vector. Only x[0 .. n_obj-2] are read.
        g: Distance value, including the +1 offset of the DTLZ7 definition.
        n_obj: Number of objectives.
        skew_exponent: Unused, accepted for a uniform signature.

    Returns:
        Objective vector of shape (n_obj,).

    Examples:
        >>> disconnected_front(np.zeros(4), 1.0, 3)
        array([0., 0., 6.])
    """
    x = np.asarray(x, dtype=np.float64)
    f = np.empty(n_obj, dtype=np.float64)
    f[: n_obj - 1] = x[: n_obj - 1]
    head = f[: n_obj - 1]
    h = n_obj - np.sum((head / (1.0 + g)) * (1.0 + np.sin(3.0 * np.pi * head)))
    f[n_obj - 1] = (1.0 + g) * h
    return f
