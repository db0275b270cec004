"""Validated configuration for DTLZ problems.

This module provides ProblemConfig, the immutable set of parameters that fully
determines a DTLZ problem instance:

- variant: which of the seven DTLZ formulas to use (1..7)
- dim: number of decision variables
- n_obj: number of objectives
- skew_exponent: density bias exponent (only read by DTLZ4)

The configuration is a frozen dataclass and is validated once on construction,
so evaluation code never has to re-check it.
"""

import sys
from dataclasses import astuple, dataclass, fields
from typing import Any

import numpy as np

from dtlz_suite.exceptions import InvalidConfiguration

N_VARIANTS: int = 7

# Dimensions are capped so that index arithmetic such as dim + n_obj stays
# well inside the platform integer range.
SIZE_CEILING: int = sys.maxsize // 3


def _check_integer(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


@dataclass(frozen=True)
class ProblemConfig:
    """Immutable, validated parameters of a DTLZ problem.

    Attributes:
        variant: DTLZ problem id in [1, 7].
        dim: Decision vector length. Must be larger than n_obj.
        n_obj: Number of objectives, at least 2.
        skew_exponent: Exponent applied to the position variables by DTLZ4.

    Validation runs in two passes. All four fields are first checked to be
    integers (numpy integers are accepted and converted, bools are not), so a
    TypeError on any field wins over a range error on another. The range
    checks then run in order: variant, n_obj, dim, skew_exponent. Only the
    first failing check is reported.

    Example:
        >>> cfg = ProblemConfig(variant=2, dim=12, n_obj=3)
        >>> cfg.k
        10
        >>> cfg.astuple()
        (2, 12, 3, 100)
    """

    variant: int = 1
    dim: int = 7
    n_obj: int = 3
    skew_exponent: int = 100

    def __post_init__(self) -> None:
        """Normalize field types and validate ranges.

        Raises:
            TypeError: If any field is not an integer.
            InvalidConfiguration: If any field is outside its valid range.
        """
        # Normalize numpy integers to plain ints (use object.__setattr__ for frozen dataclass)
        for f in fields(self):
            object.__setattr__(self, f.name, _check_integer(f.name, getattr(self, f.name)))

        if not 1 <= self.variant <= N_VARIANTS:
            raise InvalidConfiguration(
                f"DTLZ test suite contains seven problems (variant = [1 ... {N_VARIANTS}]), "
                f"variant={self.variant} was detected"
            )
        if self.n_obj < 2:
            raise InvalidConfiguration(f"DTLZ problems have a minimum of 2 objectives: n_obj={self.n_obj} was detected")
        if self.n_obj > SIZE_CEILING:
            raise InvalidConfiguration(f"n_obj={self.n_obj} is too large (maximum {SIZE_CEILING})")
        if self.dim > SIZE_CEILING:
            raise InvalidConfiguration(f"dim={self.dim} is too large (maximum {SIZE_CEILING})")
        if self.dim <= self.n_obj:
            raise InvalidConfiguration(
                f"dim has to be larger than the number of objectives: dim={self.dim}, n_obj={self.n_obj}"
            )
        if self.skew_exponent < 0:
            raise InvalidConfiguration(f"skew_exponent must be non-negative, got {self.skew_exponent}")

    @property
    def k(self) -> int:
        """Length of the distance (tail) block, dim - n_obj + 1."""
        return self.dim - self.n_obj + 1

    def astuple(self) -> tuple[int, int, int, int]:
        """Return the persisted state (variant, dim, n_obj, skew_exponent)."""
        return astuple(self)

    def to_dict(self) -> dict[str, int]:
        """Return the persisted state keyed by field name, suitable for JSON."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_state(cls, state: tuple[int, int, int, int]) -> "ProblemConfig":
        """Rebuild a configuration from the tuple produced by astuple().

        Args:
            state: Sequence of (variant, dim, n_obj, skew_exponent).

        Returns:
            A newly validated ProblemConfig.

        Raises:
            ValueError: If state does not hold exactly four values.
        """
        if len(state) != 4:
            raise ValueError(f"state must hold 4 values (variant, dim, n_obj, skew_exponent), got {len(state)}")
        variant, dim, n_obj, skew_exponent = state
        return cls(variant=variant, dim=dim, n_obj=n_obj, skew_exponent=skew_exponent)

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> "ProblemConfig":
        """Rebuild a configuration from the mapping produced by to_dict()."""
        return cls(**data)
