"""
Standard-form quadratic programs.

A :class:`QP` describes

```
    minimize    (1/2) z' V z + q' z
    subject to  A z  = b     (M rows)
                G z <= g     (J rows)
                d <= z <= u  (N variables)
```

The defaults follow the portfolio setting: ``q = 0``, ``d = 0``,
``u = +inf``, no inequality rows and the single budget equality
``1' z = 1``.

Besides :func:`make_qp`, three derivations build a new QP from an existing
problem without repeating the rank and PSD checks:

- :func:`derive_linear` replaces the linear term by ``-L * q``;
- :func:`derive_constrained` moves ``q`` from the objective into a new
  equality row ``q' z = mu``;
- :func:`qp_from_lp` regularizes an LP with ``V = diag(|c| + 0.5)``.

Derived values never share storage with their source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np

from ..logging import get_logger
from .errors import DimensionMismatch, NotPSD
from .lp import LP, build_constraints, check_equalities
from .settings import Precision
from .utils import Diagnostics, as_vector, freeze, min_eigenvalue, symmetrize

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class QP:
    """
    Validated quadratic program in standard form.

    Attributes:
        V: Symmetric positive-semidefinite ``N x N`` matrix.
        A: Equality matrix, ``M x N``, full row rank.
        G: Inequality matrix, ``J x N``.
        q: Linear term of length ``N``.
        b: Equality right-hand side of length ``M``.
        g: Inequality right-hand side of length ``J``.
        d: Lower bounds of length ``N``.
        u: Upper bounds of length ``N``, ``d <= u`` element-wise.
        N: Number of variables.
        M: Number of equality rows.
        J: Number of inequality rows.
    """

    V: np.ndarray
    A: np.ndarray
    G: np.ndarray
    q: np.ndarray
    b: np.ndarray
    g: np.ndarray
    d: np.ndarray
    u: np.ndarray
    N: int
    M: int
    J: int

    @property
    def dtype(self) -> np.dtype:
        return self.V.dtype

    @property
    def precision(self) -> Precision:
        return Precision.STANDARD if self.dtype == Precision.STANDARD.dtype else Precision.EXTENDED

    @classmethod
    def create(cls, V: Any, **kwargs: Any) -> "QP":
        """Alias of :func:`make_qp`."""
        return make_qp(V, **kwargs)

    @classmethod
    def from_lp(cls, P: LP) -> "QP":
        """Alias of :func:`qp_from_lp`."""
        return qp_from_lp(P)


def _copy(arr: np.ndarray) -> np.ndarray:
    return freeze(np.array(arr, copy=True))


def _derived(P: Union[QP, LP], V: np.ndarray, q: np.ndarray, **overrides: Any) -> QP:
    fields = dict(
        A=_copy(P.A),
        G=_copy(P.G),
        b=_copy(P.b),
        g=_copy(P.g),
        d=_copy(P.d),
        u=_copy(P.u),
        N=P.N,
        M=P.M,
        J=P.J,
    )
    fields.update(overrides)
    return QP(V=freeze(V), q=freeze(q), **fields)


def make_qp(
    V: Any,
    *,
    N: Optional[int] = None,
    q: Optional[Any] = None,
    u: Optional[Any] = None,
    d: Optional[Any] = None,
    G: Optional[Any] = None,
    g: Optional[Any] = None,
    A: Optional[Any] = None,
    b: Optional[Any] = None,
    precision: Union[Precision, str] = Precision.STANDARD,
    diagnostics: Optional[Diagnostics] = None,
) -> QP:
    """
    Build a validated :class:`QP`.

    ``V`` is replaced by its symmetric part before the PSD check; the stored
    matrix is exactly symmetric.

    Args:
        V: Quadratic term, ``N x N``.
        N: Number of variables; defaults to ``V.shape[0]``.
        q: Linear term; defaults to zero.
        u: Upper bounds; defaults to ``+inf``.
        d: Lower bounds; defaults to ``0``.
        G: Inequality matrix; defaults to no rows.
        g: Inequality right-hand side; defaults to no rows.
        A: Equality matrix; defaults to ``ones((1, N))``.
        b: Equality right-hand side; defaults to ``[1]``.
        precision: Storage precision of the arrays.
        diagnostics: Optional collector receiving a ``BoundOrderWarning`` when
            reversed bounds are swapped.

    Raises:
        DimensionMismatch: If any array disagrees with ``N``, ``M`` or ``J``.
        NotPSD: If the smallest eigenvalue of ``V`` is below ``-sqrt(eps)``.
        Infeasible: If ``A z = b`` has no solution.
        RedundantConstraints: If the rows of ``A`` are linearly dependent.
        DegenerateBound: If some ``d[i] == u[i]``.
        Underconstrained: If there are no inequalities and no finite bounds.
    """

    precision = Precision(precision)
    dtype = precision.dtype
    V = np.array(V, dtype=dtype, copy=True)
    if N is None:
        N = V.shape[0] if V.ndim == 2 else V.size
    if V.shape != (N, N):
        raise DimensionMismatch("V", (N, N), V.shape)
    V = symmetrize(V)

    tolerance = float(np.sqrt(precision.eps))
    lowest = min_eigenvalue(V)
    if not lowest > -tolerance:
        raise NotPSD(lowest, tolerance)

    if q is None:
        q = np.zeros(N)
    if A is None:
        A = np.ones((1, N))
    if b is None:
        b = np.ones(1)

    constraints, linear = build_constraints(
        N, A, b, G, g, d, u, dtype, ("q", q), diagnostics=diagnostics
    )
    logger.debug("built QP with N=%d, M=%d, J=%d", N, constraints.M, constraints.J)
    return QP(
        V=freeze(V),
        A=freeze(constraints.A),
        G=freeze(constraints.G),
        q=freeze(linear),
        b=freeze(constraints.b),
        g=freeze(constraints.g),
        d=freeze(constraints.d),
        u=freeze(constraints.u),
        N=int(N),
        M=constraints.M,
        J=constraints.J,
    )


def derive_linear(P: QP, q: Any, L: float = 0.0) -> QP:
    """
    Return ``P`` with its linear term replaced by ``-L * q``.

    Only the length of ``q`` is checked; ``V``, ``A`` and ``G`` are already
    known to be valid. Typical use is a scan over a risk-aversion parameter.

    Raises:
        DimensionMismatch: If ``len(q) != P.N``.
    """

    q = as_vector(q, "q", P.N, P.dtype)
    return _derived(P, np.array(P.V, copy=True), -P.dtype.type(L) * q)


def derive_constrained(P: QP, mu: float, q: Any, *, validate: bool = False) -> QP:
    """
    Return ``P`` with the equality ``q' z = mu`` appended and a zero linear term.

    The augmented ``A`` is not re-checked for full row rank unless
    ``validate`` is true: keeping ``q`` independent of the rows of ``P.A`` is
    the caller's responsibility.

    Raises:
        DimensionMismatch: If ``len(q) != P.N``.
        Infeasible, RedundantConstraints: Only with ``validate=True``.
    """

    q = as_vector(q, "q", P.N, P.dtype)
    A = np.vstack([P.A, q[np.newaxis, :]])
    b = np.append(P.b, P.dtype.type(mu))
    if validate:
        check_equalities(A, b)
    return _derived(
        P,
        np.array(P.V, copy=True),
        np.zeros(P.N, dtype=P.dtype),
        A=freeze(A),
        b=freeze(b),
        M=P.M + 1,
    )


def qp_from_lp(P: LP) -> QP:
    """
    Bridge an LP to the QP machinery with ``V = diag(|c| + 0.5)`` and ``q = 0``.

    The LP's constraints were validated when it was built and are copied
    unchanged.
    """

    V = np.diag(np.abs(P.c) + P.dtype.type(0.5))
    return _derived(P, V, np.zeros(P.N, dtype=P.dtype))


__all__ = ["QP", "make_qp", "derive_linear", "derive_constrained", "qp_from_lp"]
