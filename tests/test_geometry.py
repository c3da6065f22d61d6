import pytest

from roadnet.addressing import Identifier, LogicalAddress, Mask
from roadnet.geometry import Curve, InertialCoord, LogicalCoord


def _address():
    return LogicalAddress(Identifier(1, 1, 1, 0), Mask(True, True, True, False))


def test_inertial_coords():
    sut = InertialCoord(1.0, 2.0, 3.0)
    assert sut.x == 1.0
    assert sut.y == 2.0
    assert sut.z == 3.0


def test_logical_coords():
    sut = LogicalCoord(_address(), 1.0, 2.0, 3.0)
    assert sut.offset == 1.0
    assert sut.distance == 2.0
    assert sut.loft == 3.0
    assert sut.addr == _address()


@pytest.mark.parametrize("offset, distance, loft", [(-1.825, 50.0, 0.0)])
def test_logical_to_inertial_coords(offset, distance, loft):
    sut = Curve()
    logical = LogicalCoord(_address(), offset, distance, loft)
    inertial = sut.logical_to_inertial(logical)
    assert inertial.x == -1.825
    assert inertial.y == 50.0
    assert inertial.z == 0.0


@pytest.mark.parametrize("x, y, z", [(-1.825, 50.0, 0.0)])
def test_inertial_to_logical(x, y, z):
    sut = Curve()
    logical = sut.inertial_to_logical(InertialCoord(x, y, z), LogicalCoord.empty().addr)
    assert logical.offset == -1.825
    assert logical.distance == 50.0
    assert logical.loft == 0.0


def test_inertial_to_logical_defaults_to_empty_address():
    logical = Curve().inertial_to_logical(InertialCoord(1.0, 2.0, 3.0))
    assert logical.addr == LogicalCoord.empty().addr
    assert logical.addr.mask == Mask(False, False, False, False)


def test_empty_logical_coord():
    empty = LogicalCoord.empty()
    assert empty.addr.identifier == Identifier(0, 0, 0, 0)
    assert (empty.offset, empty.distance, empty.loft) == (0.0, 0.0, 0.0)


def test_round_trip_keeps_position_and_address():
    curve = Curve()
    original = LogicalCoord(_address(), 3.5, -12.25, 0.75)
    back = curve.inertial_to_logical(curve.logical_to_inertial(original), original.addr)
    assert back == original


def test_new_curve_has_no_points():
    assert Curve().points == []