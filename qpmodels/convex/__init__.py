"""
Validated LP/QP problem definitions and active-set solver vocabulary.

The subpackage turns user-supplied matrices and vectors into immutable
standard-form problems that a downstream simplex or active-set solver can
consume without further checks:

- :mod:`core` defines the ``Status`` states and ``Event`` transition records;
- :mod:`lp` and :mod:`qp` hold the validating constructors and the QP
  derivations;
- :mod:`settings` holds the precision-specific solver configuration;
- :mod:`errors` lists the reasons a problem can be rejected.
"""

from . import core, errors, lp, qp, settings, utils
from .core import Event, Status
from .errors import (
    BoundOrderWarning,
    DegenerateBound,
    DimensionMismatch,
    Infeasible,
    NotPSD,
    ProblemDefinitionError,
    RedundantConstraints,
    Underconstrained,
)
from .lp import LP, make_lp
from .qp import QP, derive_constrained, derive_linear, make_qp, qp_from_lp
from .settings import Pivot, Precision, Rule, Settings, default_settings, make_settings
from .utils import Diagnostic, Diagnostics, independent_rows, symmetrize

__all__ = [
    "core",
    "errors",
    "lp",
    "qp",
    "settings",
    "utils",
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
    "Diagnostic",
    "Diagnostics",
    "independent_rows",
    "symmetrize",
]
