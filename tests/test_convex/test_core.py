import dataclasses

import numpy as np
import pytest

from qpmodels.convex.core import Event, Status


def test_status_has_five_states():
    assert [s.name for s in Status] == ["IN", "DN", "UP", "OE", "EO"]


def test_status_predicates():
    assert Status.DN.is_bound and Status.UP.is_bound
    assert not Status.IN.is_bound
    assert Status.OE.is_inequality and Status.EO.is_inequality
    assert not Status.DN.is_inequality
    assert {s for s in Status if s.is_active} == {Status.DN, Status.UP, Status.EO}


def test_event_fields():
    event = Event(Status.IN, Status.UP, 3, 0.25)
    assert event.from_status is Status.IN
    assert event.to_status is Status.UP
    assert event.id == 3
    assert event.L == 0.25


def test_event_coerces_scalars():
    event = Event(Status.OE, Status.EO, np.int64(2), 1)
    assert type(event.id) is int
    assert type(event.L) is float


def test_event_keeps_extended_precision():
    L = np.longdouble(1) / 3
    event = Event(Status.EO, Status.OE, 0, L)
    assert event.L.dtype == np.longdouble


def test_event_rejects_non_status():
    with pytest.raises(TypeError):
        Event("IN", Status.DN, 0, 0.0)


def test_event_is_immutable_and_comparable():
    event = Event(Status.IN, Status.DN, 1, 0.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.id = 2
    assert event == Event(Status.IN, Status.DN, 1, 0.5)
    assert len({event, Event(Status.IN, Status.DN, 1, 0.5)}) == 1


@pytest.mark.parametrize("bad_id", [3.7, True, "x"])
def test_event_rejects_non_integral_id(bad_id):
    with pytest.raises(ValueError):
        Event(Status.IN, Status.DN, bad_id, 0.0)


def test_event_accepts_integral_float_id():
    assert Event(Status.IN, Status.DN, 4.0, 0.0).id == 4
