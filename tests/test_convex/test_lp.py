import numpy as np
import pytest

from qpmodels.convex.errors import (
    BoundOrderWarning,
    DegenerateBound,
    DimensionMismatch,
    Infeasible,
    ProblemDefinitionError,
    RedundantConstraints,
    Underconstrained,
)
from qpmodels.convex.lp import LP, make_lp
from qpmodels.convex.settings import Precision
from qpmodels.convex.utils import Diagnostics


def test_make_lp_defaults():
    lp = make_lp(np.array([1.0, 2.0, 3.0]), np.array([[1.0, 1.0, 1.0]]), np.array([1.0]))
    assert (lp.N, lp.M, lp.J) == (3, 1, 0)
    assert np.array_equal(lp.d, np.zeros(3))
    assert np.all(np.isinf(lp.u)) and np.all(lp.u > 0)
    assert lp.G.shape == (0, 3)
    assert lp.g.shape == (0,)
    assert lp.dtype == np.float64
    assert lp.precision is Precision.STANDARD


def test_make_lp_accepts_lists_and_column_vectors():
    lp = make_lp([1.0, -1.0], [[1.0, 2.0]], np.array([[4.0]]), G=[[1.0, 0.0]], g=[3.0])
    assert lp.b.shape == (1,)
    assert lp.J == 1
    assert np.array_equal(lp.G, np.array([[1.0, 0.0]]))


@pytest.mark.parametrize(
    "kwargs, name",
    [
        (dict(A=np.ones((1, 3))), "A"),
        (dict(G=np.ones((2, 2)), g=np.ones(1)), "G"),
        (dict(d=np.zeros(3)), "d"),
        (dict(u=np.ones(1)), "u"),
    ],
)
def test_make_lp_dimension_mismatch_names_array(kwargs, name):
    args = dict(c=np.ones(2), A=np.ones((1, 2)), b=np.ones(1))
    args.update(kwargs)
    with pytest.raises(DimensionMismatch) as excinfo:
        make_lp(args.pop("c"), args.pop("A"), args.pop("b"), **args)
    assert excinfo.value.name == name
    assert f"incompatible dimension: {name}" in str(excinfo.value)


def test_make_lp_cost_mismatch_with_explicit_n():
    with pytest.raises(DimensionMismatch) as excinfo:
        make_lp(np.ones(2), np.ones((1, 3)), np.ones(1), N=3)
    assert excinfo.value.name == "c"


def test_make_lp_infeasible_equalities():
    A = np.array([[1.0, 1.0], [2.0, 2.0]])
    b = np.array([1.0, 3.0])
    with pytest.raises(Infeasible) as excinfo:
        make_lp(np.ones(2), A, b)
    assert excinfo.value.rank_a == 1
    assert excinfo.value.rank_ab == 2


def test_make_lp_redundant_rows_reported():
    A = np.array([[1.0, 1.0, 0.0], [0.0, 1.0, 1.0], [1.0, 2.0, 1.0]])
    b = np.array([1.0, 1.0, 2.0])
    with pytest.raises(RedundantConstraints) as excinfo:
        make_lp(np.ones(3), A, b)
    assert excinfo.value.rank_a == 2
    assert excinfo.value.rows == (2,)
    assert "redundant rows in Ax=b" in str(excinfo.value)


def test_make_lp_rank_property(rng):
    for _ in range(20):
        m = int(rng.integers(1, 4))
        n = m + int(rng.integers(1, 4))
        A = rng.standard_normal((m, n))
        b = A @ rng.random(n)
        lp = make_lp(rng.standard_normal(n), A, b)
        assert np.linalg.matrix_rank(lp.A) == lp.M == m

        dependent = rng.standard_normal(m) @ A
        A_bad = np.vstack([A, dependent])
        b_bad = A_bad @ rng.random(n)
        with pytest.raises(RedundantConstraints):
            make_lp(rng.standard_normal(n), A_bad, b_bad)


def test_make_lp_degenerate_bound():
    with pytest.raises(DegenerateBound) as excinfo:
        make_lp(np.ones(2), np.array([[1.0, 1.0]]), np.array([1.0]), d=[0.0, 0.0], u=[0.0, 1.0])
    assert excinfo.value.indices == (0,)


def test_make_lp_underconstrained():
    with pytest.raises(Underconstrained):
        make_lp(
            np.ones(2),
            np.array([[1.0, 1.0]]),
            np.array([1.0]),
            d=[-np.inf, -np.inf],
        )


def test_make_lp_one_finite_bound_suffices():
    lp = make_lp(
        np.ones(2),
        np.array([[1.0, 1.0]]),
        np.array([1.0]),
        N=2,
        d=[0.0, 0.0],
        u=[np.inf, 5.0],
    )
    assert lp.u[1] == 5.0


def test_make_lp_inequalities_alone_suffice():
    lp = make_lp(
        np.ones(2),
        np.array([[1.0, 1.0]]),
        np.array([1.0]),
        d=[-np.inf, -np.inf],
        G=[[1.0, 0.0]],
        g=[2.0],
    )
    assert lp.J == 1


def test_make_lp_swaps_reversed_bounds():
    diagnostics = Diagnostics()
    lp = make_lp([1.0], [[1.0]], [3.0], d=[5.0], u=[1.0], diagnostics=diagnostics)
    assert np.array_equal(lp.d, [1.0])
    assert np.array_equal(lp.u, [5.0])
    assert len(diagnostics) == 1
    (record,) = diagnostics.of(BoundOrderWarning)
    assert record.context["indices"] == [0]


def test_make_lp_swap_leaves_caller_arrays_alone():
    d = np.array([0.0, 4.0])
    u = np.array([1.0, 2.0])
    lp = make_lp(np.ones(2), np.array([[1.0, 1.0]]), np.array([3.0]), d=d, u=u)
    assert np.all(lp.d <= lp.u)
    assert np.array_equal(d, [0.0, 4.0])
    assert np.array_equal(u, [1.0, 2.0])


def test_make_lp_stores_read_only_copies():
    A = np.array([[1.0, 1.0]])
    lp = make_lp(np.ones(2), A, np.array([1.0]))
    A[0, 0] = 10.0
    assert lp.A[0, 0] == 1.0
    with pytest.raises(ValueError):
        lp.A[0, 0] = 2.0
    with pytest.raises(AttributeError):
        lp.N = 5


def test_make_lp_is_idempotent():
    first = make_lp([2.0, 1.0], [[1.0, 1.0]], [1.0], d=[3.0, 0.0], u=[-1.0, 4.0])
    second = make_lp(first.c, first.A, first.b, G=first.G, g=first.g, d=first.d, u=first.u)
    for name in ("c", "A", "b", "G", "g", "d", "u"):
        left, right = getattr(first, name), getattr(second, name)
        assert left.dtype == right.dtype
        assert left.tobytes() == right.tobytes()
    assert (first.N, first.M, first.J) == (second.N, second.M, second.J)


def test_make_lp_extended_precision():
    lp = make_lp([1.0, 2.0], [[1.0, 1.0]], [1.0], precision="extended")
    assert lp.A.dtype == np.longdouble
    assert lp.c.dtype == np.longdouble


def test_lp_create_alias_and_error_family():
    lp = LP.create([1.0], [[1.0]], [1.0])
    assert isinstance(lp, LP)
    with pytest.raises(ValueError):
        LP.create([1.0], [[1.0], [1.0]], [1.0, 1.0])
    assert issubclass(RedundantConstraints, ProblemDefinitionError)


@pytest.mark.parametrize("G", [np.zeros((0, 5)), np.zeros((3, 0))])
def test_make_lp_rejects_misshapen_empty_inequalities(G):
    with pytest.raises(DimensionMismatch) as excinfo:
        make_lp(np.ones(2), np.ones((1, 2)), np.ones(1), G=G)
    assert excinfo.value.name == "G"


def test_make_lp_accepts_flat_empty_inequalities():
    lp = make_lp(np.ones(2), np.ones((1, 2)), np.ones(1), G=[], g=[])
    assert lp.G.shape == (0, 2)


def test_redundant_rows_on_small_scale_data():
    A = np.array([[1e-9, 0.0], [2e-9, 0.0]])
    b = np.array([1e-9, 2e-9])
    with pytest.raises(RedundantConstraints) as excinfo:
        make_lp(np.ones(2), A, b)
    assert excinfo.value.rows == (1,)
