"""Tests for the convergence metric on single vectors and populations."""

import numpy as np
import pytest

from dtlz_suite import (
    DTLZ,
    Population,
    ProblemConfig,
    SizeMismatch,
    convergence_distance,
    population_convergence,
)

ALL_VARIANTS = [1, 2, 3, 4, 5, 6, 7]


class TestConvergenceDistance:
    """Tests for the single-vector metric."""

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_zero_on_optimal_front(self, variant: int, make_problem, optimal_x) -> None:
        """An optimal tail gives exactly 0 for every variant."""
        problem = make_problem(variant=variant, dim=9, n_obj=3)
        assert problem.distance_to_front(optimal_x(problem)) == 0.0

    @pytest.mark.parametrize("variant", ALL_VARIANTS)
    def test_positive_off_front(self, variant: int, make_problem) -> None:
        """A tail away from the optimum gives a positive distance."""
        problem = make_problem(variant=variant)
        x = np.full(7, 0.9)
        assert problem.distance_to_front(x) > 0.0

    def test_ignores_position_variables(self, rng: np.random.Generator) -> None:
        """Only the tail x[n_obj-1:] enters the metric."""
        problem = DTLZ(variant=2, dim=7, n_obj=3)
        x1 = rng.uniform(0, 1, size=7)
        x2 = x1.copy()
        x2[:2] = rng.uniform(0, 1, size=2)
        assert problem.distance_to_front(x1) == problem.distance_to_front(x2)

    def test_dtlz7_has_no_offset(self) -> None:
        """The DTLZ7 metric is 9/k sum(x_M), without the +1 used in evaluation."""
        problem = DTLZ(variant=7, dim=4, n_obj=3)
        assert problem.distance_to_front(np.array([0.0, 0.0, 1.0, 1.0])) == pytest.approx(9.0)

    def test_size_mismatch(self) -> None:
        """A vector shorter than dim raises SizeMismatch."""
        problem = DTLZ(variant=1, dim=5, n_obj=3)
        with pytest.raises(SizeMismatch, match="should be 5 while 4 was detected"):
            problem.distance_to_front(np.zeros(4))

    def test_size_mismatch_longer_vector(self) -> None:
        """A vector longer than dim raises SizeMismatch."""
        cfg = ProblemConfig(variant=2, dim=5, n_obj=3)
        with pytest.raises(SizeMismatch):
            convergence_distance(cfg, np.zeros(6))

    def test_size_mismatch_is_value_error(self) -> None:
        """SizeMismatch can be caught as ValueError."""
        with pytest.raises(ValueError):
            DTLZ().distance_to_front(np.zeros(3))

    def test_p_distance_alias(self) -> None:
        """p_distance is the same metric."""
        problem = DTLZ(variant=6)
        x = np.full(7, 0.3)
        assert problem.p_distance(x) == problem.distance_to_front(x)


class TestPopulationConvergence:
    """Tests for the population-level metric."""

    def test_mean_of_members(self) -> None:
        """The population score is the arithmetic mean of member distances."""
        problem = DTLZ(variant=2, dim=3, n_obj=2)
        x = np.array([[0.3, 0.5, 0.5], [0.0, 1.5, 1.5]])
        assert problem.distance_to_front(x[0]) == 0.0
        assert problem.distance_to_front(x[1]) == pytest.approx(2.0)
        assert problem.distance_to_front(x) == pytest.approx(1.0)

    def test_accepts_population(self, rng: np.random.Generator) -> None:
        """Population objects are scored through their x matrix."""
        problem = DTLZ(variant=1)
        x = rng.uniform(0, 1, size=(5, 7))
        expected = np.mean([problem.distance_to_front(row) for row in x])
        assert problem.distance_to_front(Population(x=x)) == pytest.approx(expected)

    def test_accepts_any_population_like(self) -> None:
        """Any object with a length and an x matrix is accepted."""

        class Swarm:
            def __init__(self, x: np.ndarray) -> None:
                self.x = x

            def __len__(self) -> int:
                return self.x.shape[0]

        problem = DTLZ(variant=7)
        assert problem.distance_to_front(Swarm(np.zeros((3, 7)))) == 0.0

    def test_population_length_must_match_rows(self) -> None:
        """A population whose len() disagrees with its x matrix is rejected."""

        class Truncated:
            x = np.zeros((3, 7))

            def __len__(self) -> int:
                return 1

        with pytest.raises(ValueError, match="reports 1 members but x holds 3"):
            population_convergence(ProblemConfig(variant=7), Truncated())

    def test_mean_divides_by_population_length(self) -> None:
        """The mean is taken over len(population) members."""
        problem = DTLZ(variant=1, dim=5, n_obj=3)
        x = np.vstack([np.full(5, 0.5), np.zeros(5)])
        expected = problem.distance_to_front(x[1]) / 2
        assert problem.distance_to_front(Population(x=x)) == pytest.approx(expected)

    def test_single_member(self) -> None:
        """A population of one scores like its member."""
        problem = DTLZ(variant=3)
        x = np.full((1, 7), 0.2)
        assert problem.distance_to_front(x) == pytest.approx(problem.distance_to_front(x[0]))

    def test_empty_population_raises(self) -> None:
        """The mean over an empty population is undefined."""
        cfg = ProblemConfig()
        with pytest.raises(ValueError, match="at least one individual"):
            population_convergence(cfg, np.empty((0, 7)))

    def test_member_size_mismatch(self) -> None:
        """Members of the wrong length raise SizeMismatch."""
        with pytest.raises(SizeMismatch):
            DTLZ().distance_to_front(np.zeros((2, 6)))

    def test_rejects_non_matrix(self) -> None:
        """A 3D array is not a population."""
        with pytest.raises(ValueError, match="population must be 2D"):
            population_convergence(ProblemConfig(), np.zeros((2, 2, 7)))

    def test_parallel_matches_serial(self, rng: np.random.Generator) -> None:
        """Distributing members over workers does not change the result."""
        cfg = ProblemConfig(variant=6, dim=10, n_obj=3)
        x = rng.uniform(0, 1, size=(8, 10))
        serial = population_convergence(cfg, x)
        parallel = population_convergence(cfg, x, n_workers=2)
        assert parallel == pytest.approx(serial, rel=1e-12)
