"""
Status vocabulary and transition records for active-set solvers.

A parametric active-set (critical line) or simplex solver moves every variable
and every inequality row through a small set of states. Variables sit strictly
inside their box (``IN``) or are pinned to one of its faces (``DN``/``UP``);
inequality rows ``G z <= g`` are either slack (``OE``) or binding and treated
as equalities (``EO``). Each change of state is reported as an :class:`Event`
tagged with the value of the path parameter ``L`` at which it happened.

The solver that owns the status vectors and emits the events lives outside this
package; only the shapes are defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class Status(Enum):
    """Binding state of a variable or inequality row."""

    IN = "IN"  # strictly between the bounds
    DN = "DN"  # at the lower bound
    UP = "UP"  # at the upper bound
    OE = "OE"  # original <=, not active
    EO = "EO"  # edge, <= treated as =

    @property
    def is_bound(self) -> bool:
        """``True`` for the two states that pin a variable to its box."""
        return self in (Status.DN, Status.UP)

    @property
    def is_inequality(self) -> bool:
        """``True`` for the two states that describe a row of ``G z <= g``."""
        return self in (Status.OE, Status.EO)

    @property
    def is_active(self) -> bool:
        """``True`` when the variable or row is binding."""
        return self in (Status.DN, Status.UP, Status.EO)


@dataclass(frozen=True)
class Event:
    """
    One state transition reported by an active-set solver.

    Attributes:
        from_status: State before the transition.
        to_status: State after the transition.
        id: Index of the variable (or inequality row) that moved.
        L: Path parameter value at which the transition occurred. NumPy
            floating scalars keep their precision; anything else becomes a
            Python ``float``.
    """

    from_status: Status
    to_status: Status
    id: int
    L: float

    def __post_init__(self) -> None:
        for name in ("from_status", "to_status"):
            if not isinstance(getattr(self, name), Status):
                raise TypeError(f"{name} must be a Status, got {getattr(self, name)!r}")
        if isinstance(self.id, bool) or int(self.id) != self.id:
            raise ValueError(f"id must be an integer index, got {self.id!r}")
        object.__setattr__(self, "id", int(self.id))
        if not isinstance(self.L, np.floating):
            object.__setattr__(self, "L", float(self.L))


__all__ = ["Status", "Event"]
