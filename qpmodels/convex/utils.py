"""
Numerical helpers shared by the LP and QP constructors.

Rank and eigenvalue computations are delegated to ``numpy.linalg``. NumPy's
LAPACK bindings only accept single and double precision, so problems stored in
``numpy.longdouble`` are checked on a ``float64`` view of their data while the
stored arrays keep the extended precision.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import numpy as np

from .errors import DimensionMismatch
from .settings import Pivot


def symmetrize(matrix: np.ndarray) -> np.ndarray:
    """
    Return the symmetric part of ``matrix``.

    The result ``0.5 * (matrix + matrix.T)`` is exactly symmetric, which the
    active-set updates downstream rely on.
    """

    return 0.5 * (matrix + matrix.T)


def as_vector(value: Any, name: str, n: int, dtype: np.dtype) -> np.ndarray:
    """Copy ``value`` into a 1-D array of length ``n`` or raise ``DimensionMismatch``.

    Column vectors of shape ``(n, 1)`` are flattened.
    """

    arr = np.array(value, dtype=dtype, copy=True)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr.reshape(-1)
    if arr.shape != (n,):
        raise DimensionMismatch(name, (n,), arr.shape)
    return arr


def as_matrix(value: Any, name: str, rows: int, cols: int, dtype: np.dtype) -> np.ndarray:
    """Copy ``value`` into a ``rows x cols`` array or raise ``DimensionMismatch``.

    A flat empty sequence stands for zero rows; any 2-D input must match the
    shape exactly.
    """

    arr = np.array(value, dtype=dtype, copy=True)
    if arr.ndim == 1 and arr.size == 0 and rows == 0:
        arr = arr.reshape(0, cols)
    if arr.shape != (rows, cols):
        raise DimensionMismatch(name, (rows, cols), arr.shape)
    return arr


def vector_length(value: Any) -> int:
    """Number of entries of a vector-like argument (``len(b)``, ``len(g)``)."""

    return int(np.asarray(value).size)


def freeze(arr: np.ndarray) -> np.ndarray:
    """Mark ``arr`` read-only and return it."""

    arr.flags.writeable = False
    return arr


def matrix_rank(matrix: np.ndarray) -> int:
    """
    Numerical rank via ``numpy.linalg.matrix_rank``.

    Empty matrices (no equality rows) have rank zero.
    """

    if matrix.size == 0:
        return 0
    return int(np.linalg.matrix_rank(np.asarray(matrix, dtype=np.float64)))


def min_eigenvalue(matrix: np.ndarray) -> float:
    """Smallest eigenvalue of a symmetric matrix."""

    if matrix.size == 0:
        return 0.0
    return float(np.linalg.eigvalsh(np.asarray(matrix, dtype=np.float64))[0])


def independent_rows(
    matrix: np.ndarray,
    tol: float = 2.0**-26,
    pivot: Pivot | str = Pivot.COLUMN,
) -> np.ndarray:
    """
    Indices of a maximal set of linearly independent rows of ``matrix``.

    Two strategies are available:

    - ``Pivot.COLUMN``: Gauss-Jordan elimination on ``matrix.T`` with partial
      pivoting. The pivot columns of the reduced echelon form are the
      independent rows. Entries at or below ``tol`` times the largest absolute
      entry of ``matrix`` are treated as zero, so the result does not depend
      on the scale of the data.
    - ``Pivot.ROW``: rows are visited in order and kept when their component
      orthogonal to the rows kept so far has a norm above ``tol`` times the
      row's own norm.

    Args:
        matrix: Array of shape ``(M, N)``.
        tol: Relative zero tolerance.
        pivot: Elimination strategy.

    Returns:
        Sorted integer array of row indices.

    Example:
        >>> import numpy as np
        >>> A = np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 0.0]])
        >>> independent_rows(A).tolist()
        [0, 2]
    """

    pivot = Pivot(pivot) if isinstance(pivot, str) else pivot
    work = np.asarray(matrix, dtype=np.float64)
    if work.ndim != 2:
        raise DimensionMismatch("A", ("M", "N"), work.shape)
    if work.size == 0:
        return np.zeros(0, dtype=int)

    if pivot is Pivot.ROW:
        kept: List[int] = []
        basis = np.zeros((0, work.shape[1]))
        for i, row in enumerate(work):
            norm = np.linalg.norm(row)
            if norm == 0.0:
                continue
            residual = row - basis.T @ (basis @ row)
            residual_norm = np.linalg.norm(residual)
            if residual_norm > tol * norm:
                kept.append(i)
                basis = np.vstack([basis, residual / residual_norm])
        return np.array(kept, dtype=int)

    reduced = work.T.copy()
    n_rows, n_cols = reduced.shape
    threshold = tol * float(np.max(np.abs(reduced)))
    pivots: List[int] = []
    r = 0
    for j in range(n_cols):
        if r >= n_rows:
            break
        i = r + int(np.argmax(np.abs(reduced[r:, j])))
        if abs(reduced[i, j]) <= threshold:
            reduced[r:, j] = 0.0
            continue
        reduced[[r, i]] = reduced[[i, r]]
        reduced[r] /= reduced[r, j]
        others = np.arange(n_rows) != r
        reduced[others] -= np.outer(reduced[others, j], reduced[r])
        pivots.append(j)
        r += 1
    return np.array(pivots, dtype=int)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal finding recorded during construction."""

    category: type
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


class Diagnostics:
    """
    Collector for non-fatal findings, passed to constructors via ``diagnostics=``.

    Example:
        >>> from qpmodels.convex import make_lp
        >>> diag = Diagnostics()
        >>> lp = make_lp([1.0], [[1.0]], [1.0], d=[5.0], u=[1.0], diagnostics=diag)
        >>> len(diag)
        1
    """

    def __init__(self) -> None:
        self._records: List[Diagnostic] = []

    def record(self, category: type, message: str, **context: Any) -> Diagnostic:
        entry = Diagnostic(category=category, message=message, context=context)
        self._records.append(entry)
        return entry

    @property
    def messages(self) -> List[str]:
        return [entry.message for entry in self._records]

    def of(self, category: type) -> List[Diagnostic]:
        """Records whose category is ``category`` or a subclass of it."""
        return [entry for entry in self._records if issubclass(entry.category, category)]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)


__all__ = [
    "symmetrize",
    "as_vector",
    "as_matrix",
    "vector_length",
    "freeze",
    "matrix_rank",
    "min_eigenvalue",
    "independent_rows",
    "Diagnostic",
    "Diagnostics",
]
