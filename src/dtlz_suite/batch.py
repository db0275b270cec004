"""Population-level evaluation helpers.

Problems are written per decision vector. These helpers lift such a function
to a (n, dim) matrix of decision vectors, serially or across joblib workers.
"""

from collections.abc import Callable

import numpy as np


def lift(fn: Callable[[np.ndarray], np.ndarray | float]) -> Callable[[np.ndarray], np.ndarray]:
    """Lift a per-vector function to a matrix of decision vectors.

    Args:
        fn: Function of one decision vector, shape (dim,), returning either an
            array of shape (n_out,) or a scalar.

    Returns:
        A function mapping (n, dim) to (n, n_out), or to (n,) for scalar fn.

    Example:
        >>> problem = DTLZ(variant=2, dim=4, n_obj=2)
        >>> evaluate = lift(problem.evaluate)
        >>> evaluate(np.full((3, 4), 0.5)).shape
        (3, 2)
    """

    def lifted(x: np.ndarray) -> np.ndarray:
        return np.stack([np.asarray(fn(row)) for row in x])

    return lifted


def lift_parallel(
    fn: Callable[[np.ndarray], np.ndarray | float], n_workers: int
) -> Callable[[np.ndarray], np.ndarray]:
    """Lift a per-vector function to a matrix of decision vectors, evaluated in parallel.

    Rows are dispatched to joblib workers and the results are stacked in row
    order, so the output matches lift(fn) exactly.

    Args:
        fn: Function of one decision vector. Must be picklable for process
            based backends; bound methods of DTLZ are.
        n_workers: Number of joblib workers. Use -1 for all CPU cores.

    Returns:
        A function mapping (n, dim) to (n, n_out), or to (n,) for scalar fn.
    """
    from joblib import Parallel, delayed

    def lifted(x: np.ndarray) -> np.ndarray:
        results = Parallel(n_jobs=n_workers)(delayed(fn)(row) for row in x)
        return np.stack([np.asarray(r) for r in results])

    return lifted
