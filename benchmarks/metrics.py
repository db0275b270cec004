"""Performance metrics for multi-objective optimization.

This module provides the hypervolume indicator for DTLZ front approximations.
Convergence to the front is measured by DTLZ.distance_to_front instead, which
needs no reference point.
"""

import numpy as np
from pymoo.indicators.hv import HV


def hypervolume(objectives: np.ndarray, ref_point: np.ndarray | None = None) -> float:
    """Compute hypervolume indicator.

    Args:
        objectives: (n, n_obj) objective values of the Pareto front approximation
        ref_point: Reference point. Defaults to 1.1 in every objective, slightly
            worse than the nadir point of the normalized DTLZ2-DTLZ6 fronts.

    Returns:
        Hypervolume value (higher is better for minimization problems)

    Raises:
        ValueError: If objectives array is empty or has wrong shape
    """
    if objectives.size == 0:
        raise ValueError("objectives array cannot be empty")

    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")

    if ref_point is None:
        ref_point = np.full(objectives.shape[1], 1.1)

    indicator = HV(ref_point=ref_point)
    return float(indicator(objectives))
