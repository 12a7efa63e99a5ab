"""
Standard-form linear programs.

An :class:`LP` describes

```
    minimize    c' x
    subject to  A x  = b     (M rows)
                G x <= g     (J rows)
                d <= x <= u  (N variables)
```

Free variables use ``d[i] = -inf`` and ``u[i] = +inf``. By default there are
no inequality rows, ``d = 0`` and ``u = +inf``, i.e. ``x >= 0``.

:func:`make_lp` is the only way to obtain an LP. It rejects ill-posed data
(dimension mismatches, an inconsistent or rank-deficient ``A x = b``, fixed
variables, a program without any inequality or finite bound) and repairs
reversed bound pairs by swapping them. The returned value owns read-only
copies of all arrays.

Example:
    >>> import numpy as np
    >>> from qpmodels.convex.lp import make_lp
    >>> lp = make_lp(np.array([1.0, 2.0]), np.array([[1.0, 1.0]]), np.array([1.0]))
    >>> (lp.N, lp.M, lp.J)
    (2, 1, 0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np

from ..logging import get_logger
from .errors import (
    BoundOrderWarning,
    DegenerateBound,
    Infeasible,
    RedundantConstraints,
    Underconstrained,
)
from .settings import Precision
from .utils import (
    Diagnostics,
    as_matrix,
    as_vector,
    freeze,
    independent_rows,
    matrix_rank,
    vector_length,
)

logger = get_logger(__name__)


@dataclass
class _ConstraintSet:
    A: np.ndarray
    b: np.ndarray
    G: np.ndarray
    g: np.ndarray
    d: np.ndarray
    u: np.ndarray
    M: int
    J: int


def _resolve_dtype(precision: Union[Precision, str]) -> np.dtype:
    return Precision(precision).dtype


def check_equalities(A: np.ndarray, b: np.ndarray) -> None:
    """
    Require ``A x = b`` to be consistent and free of redundant rows.

    Raises:
        Infeasible: If ``rank([A|b]) != rank(A)``.
        RedundantConstraints: If ``rank(A) < M``; the dependent rows are
            attached to the exception.
    """

    m = A.shape[0]
    rank_a = matrix_rank(A)
    rank_ab = matrix_rank(np.column_stack([A, b])) if m else 0
    if rank_ab != rank_a:
        raise Infeasible(rank_a, rank_ab)
    if rank_a < m:
        kept = set(independent_rows(A).tolist())
        raise RedundantConstraints(rank_a, m, [i for i in range(m) if i not in kept])


def build_constraints(
    n: int,
    A: Any,
    b: Any,
    G: Optional[Any],
    g: Optional[Any],
    d: Optional[Any],
    u: Optional[Any],
    dtype: np.dtype,
    linear: tuple[str, Any],
    diagnostics: Optional[Diagnostics] = None,
) -> tuple[_ConstraintSet, np.ndarray]:
    """
    Validate and normalize the constraint data shared by LPs and QPs.

    ``linear`` is the ``(name, value)`` pair of the objective's linear term
    (``c`` for an LP, ``q`` for a QP); it is shape-checked after ``A`` and
    ``G`` and returned as a private copy.

    The checks run in this order: shapes, ``A x = b``, degenerate bounds,
    presence of at least one inequality or finite bound, and finally the
    repair of reversed bound pairs.
    """

    if u is None:
        u = np.full(n, np.inf)
    if d is None:
        d = np.zeros(n)
    if G is None:
        G = np.zeros((0, n))
    if g is None:
        g = np.zeros(0)

    m = vector_length(b)
    j = vector_length(g)

    A = as_matrix(A, "A", m, n, dtype)
    G = as_matrix(G, "G", j, n, dtype)
    name, value = linear
    linear_term = as_vector(value, name, n, dtype)
    d = as_vector(d, "d", n, dtype)
    u = as_vector(u, "u", n, dtype)
    b = as_vector(b, "b", m, dtype)
    g = as_vector(g, "g", j, dtype)

    check_equalities(A, b)

    fixed = np.flatnonzero(d == u)
    if fixed.size:
        raise DegenerateBound(fixed)

    if j == 0 and not (np.any(np.isfinite(d)) or np.any(np.isfinite(u))):
        raise Underconstrained()

    reversed_ = np.flatnonzero(u < d)
    if reversed_.size:
        d[reversed_], u[reversed_] = u[reversed_], d[reversed_]
        message = "swap the elements where u < d, to make sure u > d"
        logger.warning("%s: indices %s", message, reversed_.tolist())
        if diagnostics is not None:
            diagnostics.record(BoundOrderWarning, message, indices=reversed_.tolist())

    constraints = _ConstraintSet(A=A, b=b, G=G, g=g, d=d, u=u, M=m, J=j)
    return constraints, linear_term


@dataclass(frozen=True, eq=False)
class LP:
    """
    Validated linear program in standard form.

    Attributes:
        c: Cost vector of length ``N``.
        A: Equality matrix, ``M x N``, full row rank.
        b: Equality right-hand side of length ``M``.
        G: Inequality matrix, ``J x N``.
        g: Inequality right-hand side of length ``J``.
        d: Lower bounds of length ``N``.
        u: Upper bounds of length ``N``, ``d <= u`` element-wise.
        N: Number of variables.
        M: Number of equality rows.
        J: Number of inequality rows.
    """

    c: np.ndarray
    A: np.ndarray
    b: np.ndarray
    G: np.ndarray
    g: np.ndarray
    d: np.ndarray
    u: np.ndarray
    N: int
    M: int
    J: int

    @property
    def dtype(self) -> np.dtype:
        return self.c.dtype

    @property
    def precision(self) -> Precision:
        return Precision.STANDARD if self.dtype == Precision.STANDARD.dtype else Precision.EXTENDED

    @classmethod
    def create(cls, c: Any, A: Any, b: Any, **kwargs: Any) -> "LP":
        """Alias of :func:`make_lp`."""
        return make_lp(c, A, b, **kwargs)


def make_lp(
    c: Any,
    A: Any,
    b: Any,
    *,
    N: Optional[int] = None,
    u: Optional[Any] = None,
    d: Optional[Any] = None,
    G: Optional[Any] = None,
    g: Optional[Any] = None,
    precision: Union[Precision, str] = Precision.STANDARD,
    diagnostics: Optional[Diagnostics] = None,
) -> LP:
    """
    Build a validated :class:`LP`.

    Args:
        c: Cost vector.
        A: Equality matrix, one row per entry of ``b``.
        b: Equality right-hand side.
        N: Number of variables; defaults to ``len(c)``.
        u: Upper bounds; defaults to ``+inf``.
        d: Lower bounds; defaults to ``0``.
        G: Inequality matrix; defaults to no rows.
        g: Inequality right-hand side; defaults to no rows.
        precision: Storage precision of the arrays.
        diagnostics: Optional collector receiving a ``BoundOrderWarning`` when
            reversed bounds are swapped.

    Raises:
        DimensionMismatch: If any array disagrees with ``N``, ``M`` or ``J``.
        Infeasible: If ``A x = b`` has no solution.
        RedundantConstraints: If the rows of ``A`` are linearly dependent.
        DegenerateBound: If some ``d[i] == u[i]``.
        Underconstrained: If there are no inequalities and no finite bounds.
    """

    dtype = _resolve_dtype(precision)
    if N is None:
        N = vector_length(c)
    constraints, cost = build_constraints(
        N, A, b, G, g, d, u, dtype, ("c", c), diagnostics=diagnostics
    )
    logger.debug("built LP with N=%d, M=%d, J=%d", N, constraints.M, constraints.J)
    return LP(
        c=freeze(cost),
        A=freeze(constraints.A),
        b=freeze(constraints.b),
        G=freeze(constraints.G),
        g=freeze(constraints.g),
        d=freeze(constraints.d),
        u=freeze(constraints.u),
        N=int(N),
        M=constraints.M,
        J=constraints.J,
    )


__all__ = ["LP", "make_lp", "build_constraints", "check_equalities"]
