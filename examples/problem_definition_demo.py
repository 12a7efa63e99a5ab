"""
Example: building problems for an active-set solver

Shows how raw data becomes validated LP/QP values, how the constructors
reject ill-posed input, and how the QP derivations prepare the problems a
parametric (efficient frontier) solver walks through.
"""

import numpy as np

from qpmodels import (
    Diagnostics,
    Event,
    NotPSD,
    Precision,
    RedundantConstraints,
    Status,
    default_settings,
    derive_constrained,
    derive_linear,
    make_lp,
    make_qp,
    qp_from_lp,
)


def example_portfolio_qp():
    """Example: mean-variance QP with the default budget equality."""
    print("=" * 60)
    print("Example 1: Portfolio QP and its derivations")
    print("=" * 60)

    mean = np.array([0.08, 0.12, 0.10])
    V = np.array(
        [
            [0.040, 0.006, 0.010],
            [0.006, 0.090, 0.012],
            [0.010, 0.012, 0.060],
        ]
    )
    P = make_qp(V, u=np.full(3, 0.7))
    print(f"N={P.N}, M={P.M}, J={P.J}")

    # risk-aversion scan: minimize 1/2 z'Vz - L mu'z
    for L in (0.0, 0.5, 1.0):
        Q = derive_linear(P, mean, L)
        print(f"L={L}: q = {Q.q}")

    # pin the expected return at 10%
    target = derive_constrained(P, 0.10, mean, validate=True)
    print(f"constrained problem has M={target.M} equality rows")
    print()


def example_rejections():
    """Example: data the constructors refuse or repair."""
    print("=" * 60)
    print("Example 2: Validation")
    print("=" * 60)

    try:
        make_qp(np.array([[0.0, 1.0], [1.0, 0.0]]))
    except NotPSD as err:
        print(f"NotPSD: {err}")

    try:
        make_lp(np.ones(2), np.array([[1.0, 1.0], [2.0, 2.0]]), np.array([1.0, 2.0]))
    except RedundantConstraints as err:
        print(f"RedundantConstraints: {err} (rows {err.rows})")

    diagnostics = Diagnostics()
    lp = make_lp([1.0], [[1.0]], [3.0], d=[5.0], u=[1.0], diagnostics=diagnostics)
    print(f"repaired bounds d={lp.d}, u={lp.u}; diagnostics: {diagnostics.messages}")
    print()


def example_extended_precision():
    """Example: LP bridged to a QP in extended precision."""
    print("=" * 60)
    print("Example 3: Extended precision")
    print("=" * 60)

    lp = make_lp(
        [3.0, -2.0],
        [[1.0, 1.0]],
        [1.0],
        precision=Precision.EXTENDED,
    )
    qp = qp_from_lp(lp)
    settings = default_settings(qp.precision)
    print(f"V dtype: {qp.V.dtype}, diag(V) = {np.diag(qp.V)}")
    print(f"tol = {settings.tol}, tol_g = {settings.tol_g}, rule = {settings.rule.value}")

    event = Event(Status.IN, Status.UP, 0, np.longdouble(0.25))
    print(f"sample event: {event}")
    print()


if __name__ == "__main__":
    example_portfolio_qp()
    example_rejections()
    example_extended_precision()
