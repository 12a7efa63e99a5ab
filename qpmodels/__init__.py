"""qpmodels - validated LP/QP definitions for active-set and simplex solvers."""

__version__ = "0.1.0"

from .convex import (
    LP,
    QP,
    BoundOrderWarning,
    DegenerateBound,
    Diagnostics,
    DimensionMismatch,
    Event,
    Infeasible,
    NotPSD,
    Pivot,
    Precision,
    ProblemDefinitionError,
    RedundantConstraints,
    Rule,
    Settings,
    Status,
    Underconstrained,
    default_settings,
    derive_constrained,
    derive_linear,
    independent_rows,
    make_lp,
    make_qp,
    make_settings,
    qp_from_lp,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    # Version
    "__version__",
    # Vocabulary
    "Status",
    "Event",
    # Problems
    "LP",
    "QP",
    "make_lp",
    "make_qp",
    "derive_linear",
    "derive_constrained",
    "qp_from_lp",
    # Settings
    "Precision",
    "Pivot",
    "Rule",
    "Settings",
    "make_settings",
    "default_settings",
    # Errors
    "ProblemDefinitionError",
    "DimensionMismatch",
    "Infeasible",
    "RedundantConstraints",
    "DegenerateBound",
    "Underconstrained",
    "NotPSD",
    "BoundOrderWarning",
    # Helpers
    "Diagnostics",
    "independent_rows",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
