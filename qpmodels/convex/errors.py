"""
Exceptions raised while validating LP and QP data.

Every fatal condition derives from :class:`ProblemDefinitionError`, itself a
``ValueError``, so callers may catch the whole family or a single cause. The
only non-fatal condition, a reversed bound pair, is described by
:class:`BoundOrderWarning`; it is logged and recorded but never raised.
"""

from __future__ import annotations

from typing import Sequence


class ProblemDefinitionError(ValueError):
    """Base class for rejected problem data."""


class DimensionMismatch(ProblemDefinitionError):
    """An array does not match the declared ``N``/``M``/``J``."""

    def __init__(self, name: str, expected: tuple, actual: tuple) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"incompatible dimension: {name} (expected {expected}, got {actual})"
        )


class Infeasible(ProblemDefinitionError):
    """``A x = b`` has no solution: ``rank([A|b]) > rank(A)``."""

    def __init__(self, rank_a: int, rank_ab: int) -> None:
        self.rank_a = rank_a
        self.rank_ab = rank_ab
        super().__init__(f"infeasible: Ax=b (rank(A)={rank_a}, rank([A|b])={rank_ab})")


class RedundantConstraints(ProblemDefinitionError):
    """The rows of ``A`` are linearly dependent."""

    def __init__(self, rank_a: int, m: int, rows: Sequence[int] = ()) -> None:
        self.rank_a = rank_a
        self.m = m
        self.rows = tuple(int(i) for i in rows)
        detail = f"rank(A)={rank_a} < M={m}"
        if self.rows:
            detail += f", dependent rows {list(self.rows)}"
        super().__init__(f"redundant rows in Ax=b ({detail})")


class DegenerateBound(ProblemDefinitionError):
    """Some coordinate has ``d[i] == u[i]``."""

    def __init__(self, indices: Sequence[int]) -> None:
        self.indices = tuple(int(i) for i in indices)
        super().__init__(
            f"downside bound == upper bound detected at {list(self.indices)}"
        )


class Underconstrained(ProblemDefinitionError):
    """No inequality rows and no finite bound on any variable."""

    def __init__(self) -> None:
        super().__init__("no inequalities and bounds")


class NotPSD(ProblemDefinitionError):
    """The quadratic term has an eigenvalue below ``-sqrt(eps)``."""

    def __init__(self, min_eigenvalue: float, tolerance: float) -> None:
        self.min_eigenvalue = float(min_eigenvalue)
        self.tolerance = float(tolerance)
        super().__init__(
            "variance matrix is not positive-semidefinite "
            f"(min eigenvalue {self.min_eigenvalue:.3e} < -{self.tolerance:.3e})"
        )


class BoundOrderWarning(UserWarning):
    """``u[i] < d[i]`` was found and the pair was swapped."""


__all__ = [
    "ProblemDefinitionError",
    "DimensionMismatch",
    "Infeasible",
    "RedundantConstraints",
    "DegenerateBound",
    "Underconstrained",
    "NotPSD",
    "BoundOrderWarning",
]
