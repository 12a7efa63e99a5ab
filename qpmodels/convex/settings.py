"""
Solver settings with precision-specific default tolerances.

Two canonical profiles exist. ``Precision.STANDARD`` works in ``float64`` with
``tol = 2**-26`` and ``tol_g = 2**-33``; ``Precision.EXTENDED`` works in
``numpy.longdouble`` with ``tol = 2**-76`` and ``tol_g = 2**-87``. Both default
to 7777 iterations, column pivoting for purging redundant rows and Dantzig's
rule for the simplex.

Example:
    >>> from qpmodels.convex.settings import Precision, make_settings
    >>> settings = make_settings(Precision.EXTENDED, rule="maxImprovement")
    >>> settings.tol == 2.0 ** -76
    True
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import numpy as np


class Precision(Enum):
    """Floating-point profile for settings and problem storage."""

    STANDARD = "standard"
    EXTENDED = "extended"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.float64 if self is Precision.STANDARD else np.longdouble)

    @property
    def eps(self) -> np.floating:
        return np.finfo(self.dtype).eps


class Pivot(Enum):
    """Pivoting used when purging redundant rows by Gauss-Jordan elimination."""

    COLUMN = "column"
    ROW = "row"


class Rule(Enum):
    """Entering-variable rule for the simplex."""

    DANTZIG = "Dantzig"
    MAX_IMPROVEMENT = "maxImprovement"


_DEFAULT_MAX_ITER = 7777

# (tol, tol_g) exponents of two per precision
_DEFAULT_TOLERANCES = {
    Precision.STANDARD: (-26, -33),
    Precision.EXTENDED: (-76, -87),
}


def _coerce_enum(enum_cls: type, value: Any, field: str) -> Enum:
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if value == member.value or (isinstance(value, str) and value.upper() == member.name):
            return member
    choices = [member.value for member in enum_cls]
    raise ValueError(f"Unsupported {field} {value!r}. Supported values: {choices}")


@dataclass(frozen=True)
class Settings:
    """
    Configuration handed to an active-set or simplex solver.

    Args:
        max_iter: Iteration cap. Must be positive.
        tol: General scalar tolerance; ``None`` takes the profile default.
        tol_g: Tolerance for Greeks (beta and gamma); ``None`` takes the
            profile default.
        pivot: Pivoting for purging redundant rows, ``"column"`` or ``"row"``.
        rule: Simplex rule, ``"Dantzig"`` or ``"maxImprovement"``.
        precision: Profile that fixes the dtype and the defaults of ``tol``
            and ``tol_g``.
    """

    max_iter: int = _DEFAULT_MAX_ITER
    tol: Optional[float] = None
    tol_g: Optional[float] = None
    pivot: Pivot = Pivot.COLUMN
    rule: Rule = Rule.DANTZIG
    precision: Precision = Precision.STANDARD

    def __post_init__(self) -> None:
        precision = _coerce_enum(Precision, self.precision, "precision")
        object.__setattr__(self, "precision", precision)
        object.__setattr__(self, "pivot", _coerce_enum(Pivot, self.pivot, "pivot"))
        object.__setattr__(self, "rule", _coerce_enum(Rule, self.rule, "rule"))

        if isinstance(self.max_iter, bool) or int(self.max_iter) != self.max_iter:
            raise ValueError(f"max_iter must be an integer, got {self.max_iter!r}")
        if self.max_iter <= 0:
            raise ValueError("max_iter must be positive.")
        object.__setattr__(self, "max_iter", int(self.max_iter))

        scalar = precision.dtype.type
        for name, exponent in zip(("tol", "tol_g"), _DEFAULT_TOLERANCES[precision]):
            value = getattr(self, name)
            # powers of two formed in the profile's dtype are exact
            value = scalar(2) ** exponent if value is None else scalar(value)
            if not value > 0:
                raise ValueError(f"{name} must be positive.")
            object.__setattr__(self, name, value)

    def replace(self, **changes: Any) -> "Settings":
        """
        Return a copy with ``changes`` applied and re-validated.

        Switching ``precision`` without passing ``tol``/``tol_g`` resets them
        to the new profile's defaults.
        """
        precision = _coerce_enum(Precision, changes.get("precision", self.precision), "precision")
        if precision is not self.precision:
            changes.setdefault("tol", None)
            changes.setdefault("tol_g", None)
        return dataclasses.replace(self, **changes)


def make_settings(
    precision: Union[Precision, str] = Precision.STANDARD,
    *,
    max_iter: int = _DEFAULT_MAX_ITER,
    tol: Optional[float] = None,
    tol_g: Optional[float] = None,
    pivot: Union[Pivot, str] = Pivot.COLUMN,
    rule: Union[Rule, str] = Rule.DANTZIG,
) -> Settings:
    """
    Build :class:`Settings` with the defaults of ``precision``.

    Tolerances left as ``None`` take the profile defaults.

    Raises:
        ValueError: For an unknown ``precision``/``pivot``/``rule`` or a
            non-positive ``max_iter`` or tolerance.
    """
    return Settings(
        max_iter=max_iter,
        tol=tol,
        tol_g=tol_g,
        pivot=pivot,
        rule=rule,
        precision=precision,
    )


def default_settings(precision: Union[Precision, str] = Precision.STANDARD) -> Settings:
    """Return the canonical default settings of ``precision``."""
    return make_settings(precision)


__all__ = [
    "Precision",
    "Pivot",
    "Rule",
    "Settings",
    "make_settings",
    "default_settings",
]
