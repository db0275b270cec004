"""Mapping from DTLZ problem ids to their distance and shape functions.

Each DTLZ variant is a pairing of one distance function (distance.py) with one
shape function (shapes.py). The pairing is data, not a class hierarchy:

    variant   distance   shape
    DTLZ1     g13        linear_front
    DTLZ2     g245       spherical_front
    DTLZ3     g13        spherical_front
    DTLZ4     g245       skewed_spherical_front
    DTLZ5     g245       curve_front
    DTLZ6     g6         curve_front
    DTLZ7     g7         disconnected_front   (g offset by +1 before shaping)
"""

from collections.abc import Callable
from enum import IntEnum
from typing import NamedTuple

import numpy as np

from dtlz_suite.distance import g6, g7, g13, g245
from dtlz_suite.exceptions import InvalidConfiguration
from dtlz_suite.shapes import (
    curve_front,
    disconnected_front,
    linear_front,
    skewed_spherical_front,
    spherical_front,
)

DistanceFunction = Callable[[np.ndarray], float]
ShapeFunction = Callable[[np.ndarray, float, int, int], np.ndarray]


class Variant(IntEnum):
    """The seven problems of the DTLZ suite."""

    DTLZ1 = 1
    DTLZ2 = 2
    DTLZ3 = 3
    DTLZ4 = 4
    DTLZ5 = 5
    DTLZ6 = 6
    DTLZ7 = 7


class Formulas(NamedTuple):
    """Distance/shape pairing of one variant.

    Attributes:
        distance: Distance function applied to the tail block x_M.
        shape: Shape function building the objective vector.
        g_offset: Added to the distance value before it is handed to the shape.
            Only DTLZ7 uses a non-zero offset, restoring the +1 of its
            published g-function.
    """

    distance: DistanceFunction
    shape: ShapeFunction
    g_offset: float = 0.0


FORMULAS: dict[Variant, Formulas] = {
    Variant.DTLZ1: Formulas(g13, linear_front),
    Variant.DTLZ2: Formulas(g245, spherical_front),
    Variant.DTLZ3: Formulas(g13, spherical_front),
    Variant.DTLZ4: Formulas(g245, skewed_spherical_front),
    Variant.DTLZ5: Formulas(g245, curve_front),
    Variant.DTLZ6: Formulas(g6, curve_front),
    Variant.DTLZ7: Formulas(g7, disconnected_front, g_offset=1.0),
}

_missing = set(Variant) - FORMULAS.keys()
if _missing:
    raise RuntimeError(f"No formulas registered for {sorted(v.name for v in _missing)}")


def formulas_for(variant: int) -> Formulas:
    """Return the distance/shape pairing for a DTLZ problem id.

    Args:
        variant: Problem id in [1, 7] (a Variant member or a plain int).

    Returns:
        The Formulas entry for the variant.

    Raises:
        InvalidConfiguration: If variant is not a DTLZ problem id.

    Examples:
        >>> formulas_for(3).distance is g13
        True
    """
    try:
        key = Variant(variant)
    except ValueError:
        raise InvalidConfiguration(f"variant={variant} is not a DTLZ problem id (expected 1 ... 7)") from None
    return FORMULAS[key]
