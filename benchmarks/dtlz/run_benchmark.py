"""Benchmark runner measuring Pymoo and DEAP NSGA-II on the DTLZ suite.

This script runs NSGA-II from two libraries on DTLZ1-7 with consistent
parameters and scores the final populations with the analytic convergence
metric (mean distance to the optimal front) and the hypervolume.

Usage:
    uv run python benchmarks/dtlz/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from pymoo.algorithms.moo.nsga2 import NSGA2
from pymoo.core.problem import Problem as PymooProblem
from pymoo.operators.crossover.sbx import SBX
from pymoo.operators.mutation.pm import PM
from pymoo.operators.sampling.rnd import FloatRandomSampling
from pymoo.optimize import minimize
from pymoo.termination import get_termination

from benchmarks.dtlz.problems import BOUNDS, PROBLEMS, reference_point
from benchmarks.metrics import hypervolume
from dtlz_suite import DTLZ

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
POP_SIZE = 100
N_GENERATIONS = 250
SBX_ETA = 15.0
PM_ETA = 20.0
N_RUNS = 10
SEEDS = list(range(N_RUNS))


class PymooDTLZProblem(PymooProblem):
    """Wrapper to use DTLZ problems with Pymoo."""

    def __init__(self, problem: DTLZ) -> None:
        lower, upper = problem.get_bounds()
        super().__init__(n_var=problem.dim, n_obj=problem.n_obj, xl=lower, xu=upper)
        self._problem = problem

    def _evaluate(self, x: np.ndarray, out: dict, *args, **kwargs) -> None:
        out["F"] = self._problem.evaluate_population(x)


def score(problem: DTLZ, x: np.ndarray, objectives: np.ndarray) -> tuple[float, float]:
    """Return (mean convergence distance, hypervolume) of a final population."""
    return problem.distance_to_front(x), hypervolume(objectives, np.array(reference_point(problem)))


def run_pymoo(problem: DTLZ, seed: int) -> tuple[float, float, float]:
    """Run NSGA-II using Pymoo library.

    Args:
        problem: The DTLZ instance.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (convergence, hypervolume, elapsed_time_seconds).
    """
    algorithm = NSGA2(
        pop_size=POP_SIZE,
        sampling=FloatRandomSampling(),
        crossover=SBX(eta=SBX_ETA, prob=1.0),
        mutation=PM(eta=PM_ETA, prob=1.0 / problem.dim),
        eliminate_duplicates=False,
    )

    start_time = time.perf_counter()
    result = minimize(
        PymooDTLZProblem(problem),
        algorithm,
        get_termination("n_gen", N_GENERATIONS),
        seed=seed,
        verbose=False,
    )
    elapsed = time.perf_counter() - start_time

    convergence, hv = score(problem, result.pop.get("X"), result.pop.get("F"))
    return convergence, hv, elapsed


def _setup_deap(n_obj: int) -> None:
    """Set up DEAP creator classes (handles cleanup for multiple runs)."""
    from deap import base, creator

    if hasattr(creator, "FitnessMin"):
        del creator.FitnessMin
    if hasattr(creator, "Individual"):
        del creator.Individual

    creator.create("FitnessMin", base.Fitness, weights=(-1.0,) * n_obj)
    creator.create("Individual", list, fitness=creator.FitnessMin)


def run_deap(problem: DTLZ, seed: int) -> tuple[float, float, float]:
    """Run NSGA-II using DEAP library.

    Args:
        problem: The DTLZ instance.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (convergence, hypervolume, elapsed_time_seconds).
    """
    import random

    from deap import base, creator, tools

    _setup_deap(problem.n_obj)

    toolbox = base.Toolbox()
    toolbox.register("attr_float", random.uniform, BOUNDS[0], BOUNDS[1])
    toolbox.register("individual", tools.initRepeat, creator.Individual, toolbox.attr_float, n=problem.dim)
    toolbox.register("population", tools.initRepeat, list, toolbox.individual)
    toolbox.register("evaluate", lambda ind: tuple(problem.evaluate(np.array(ind))))
    toolbox.register("mate", tools.cxSimulatedBinaryBounded, eta=SBX_ETA, low=BOUNDS[0], up=BOUNDS[1])
    toolbox.register(
        "mutate",
        tools.mutPolynomialBounded,
        eta=PM_ETA,
        low=BOUNDS[0],
        up=BOUNDS[1],
        indpb=1.0 / problem.dim,
    )
    toolbox.register("select", tools.selNSGA2)

    random.seed(seed)
    np.random.seed(seed)

    start_time = time.perf_counter()

    pop = toolbox.population(n=POP_SIZE)
    for ind in pop:
        ind.fitness.values = toolbox.evaluate(ind)

    # Assign crowding distance for initial population (required for selTournamentDCD)
    pop = toolbox.select(pop, len(pop))

    for _ in range(N_GENERATIONS):
        offspring = [toolbox.clone(ind) for ind in tools.selTournamentDCD(pop, len(pop))]

        for i in range(0, len(offspring) - 1, 2):
            toolbox.mate(offspring[i], offspring[i + 1])
            del offspring[i].fitness.values
            del offspring[i + 1].fitness.values

        for mutant in offspring:
            toolbox.mutate(mutant)
            del mutant.fitness.values

        for ind in offspring:
            ind.fitness.values = toolbox.evaluate(ind)

        pop = toolbox.select(pop + offspring, POP_SIZE)

    elapsed = time.perf_counter() - start_time

    x = np.array([list(ind) for ind in pop])
    objectives = np.array([ind.fitness.values for ind in pop])
    convergence, hv = score(problem, x, objectives)
    return convergence, hv, elapsed


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    metadata = {
        "timestamp": datetime.now(UTC).isoformat(),
        "parameters": {
            "pop_size": POP_SIZE,
            "n_generations": N_GENERATIONS,
            "bounds": list(BOUNDS),
            "sbx_eta": SBX_ETA,
            "pm_eta": PM_ETA,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
        "problems": {name: problem.to_dict() for name, problem in PROBLEMS.items()},
    }

    results = []
    runners = [("pymoo", run_pymoo), ("deap", run_deap)]

    total_runs = len(PROBLEMS) * len(runners) * N_RUNS
    current_run = 0

    for problem_name, problem in PROBLEMS.items():
        for library_name, runner in runners:
            for seed in SEEDS:
                current_run += 1
                logger.info(f"Running [{current_run}/{total_runs}]: {library_name} on {problem.name} (seed={seed})")

                convergence, hv, elapsed = runner(problem, seed)

                results.append(
                    {
                        "library": library_name,
                        "problem": problem.name,
                        "seed": seed,
                        "convergence": convergence,
                        "hypervolume": hv,
                        "time_seconds": elapsed,
                    }
                )

                logger.info(f"  Convergence: {convergence:.4g}, HV: {hv:.4f}, Time: {elapsed:.2f}s")

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        data[r["problem"]][r["library"]].append((r["convergence"], r["hypervolume"]))

    problems = sorted(data.keys())
    libraries = ["pymoo", "deap"]

    print("\n" + "=" * 80)
    print("BENCHMARK SUMMARY")
    print("=" * 80)
    print(f"\nParameters: pop_size={POP_SIZE}, generations={N_GENERATIONS}, runs={N_RUNS}")
    print()

    header = f"{'Problem':<10}"
    for lib in libraries:
        header += f"{lib + ' conv':>16}{lib + ' HV':>16}"
    print(header)
    print("-" * 74)

    for problem in problems:
        row = f"{problem:<10}"
        for lib in libraries:
            scores = data[problem][lib]
            if scores:
                conv, hv = np.mean(scores, axis=0)
                row += f"{conv:>16.4g}{hv:>16.4f}"
            else:
                row += f"{'N/A':>16}{'N/A':>16}"
        print(row)

    print("-" * 74)
    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting DTLZ benchmark suite")
    logger.info(f"Parameters: pop_size={POP_SIZE}, generations={N_GENERATIONS}, runs={N_RUNS}")

    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
