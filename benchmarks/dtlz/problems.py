"""Standard DTLZ instances for multi-objective optimization benchmarking.

Instances follow the sizes recommended by Deb et al.: the distance block has
k = 5 variables for DTLZ1, k = 10 for DTLZ2-DTLZ6 and k = 20 for DTLZ7, so
dim = n_obj + k - 1. All problems have decision variables in [0, 1].

References:
    Deb, K., Thiele, L., Laumanns, M., & Zitzler, E. (2005). Scalable test
    problems for evolutionary multiobjective optimization. In Evolutionary
    Multiobjective Optimization (pp. 105-145). Springer.
"""

from dtlz_suite import DTLZ, Variant

# Problem configuration
N_OBJ: int = 3
BOUNDS: tuple[float, float] = (0.0, 1.0)
K_BY_VARIANT: dict[Variant, int] = {
    Variant.DTLZ1: 5,
    Variant.DTLZ2: 10,
    Variant.DTLZ3: 10,
    Variant.DTLZ4: 10,
    Variant.DTLZ5: 10,
    Variant.DTLZ6: 10,
    Variant.DTLZ7: 20,
}


def make_problem(variant: Variant, n_obj: int = N_OBJ) -> DTLZ:
    """Build the standard instance of a variant for the given objective count."""
    return DTLZ(variant=int(variant), dim=n_obj + K_BY_VARIANT[variant] - 1, n_obj=n_obj)


# Registry of all benchmark instances
PROBLEMS: dict[str, DTLZ] = {variant.name.lower(): make_problem(variant) for variant in Variant}


def reference_point(problem: DTLZ) -> list[float]:
    """Hypervolume reference point slightly worse than the nadir of the optimal front.

    DTLZ7 has its last objective in [0, 2 n_obj] on the front; the other
    problems are bounded by 1 in every objective.
    """
    ref = [1.1] * problem.n_obj
    if problem.variant == Variant.DTLZ7:
        ref[-1] = 2.2 * problem.n_obj
    return ref
