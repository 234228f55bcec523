import pytest

from cvmgeo.units import Unit, UnitError, unit_factor


def test_radians_to_degrees():
    assert unit_factor(Unit.RADIANS, Unit.DEGREES) == 57.29577951308231


def test_meters_to_us_feet():
    assert unit_factor(Unit.METERS, Unit.US_FEET) == 3.280833333333333


def test_degrees_to_seconds():
    assert unit_factor(Unit.DEGREES, Unit.SECONDS) == 3600.0


@pytest.mark.parametrize("unit", list(Unit))
def test_identity_is_one(unit):
    assert unit_factor(unit, unit) == 1.0


def test_round_trip_degrees_radians():
    product = unit_factor(Unit.DEGREES, Unit.RADIANS) * unit_factor(
        Unit.RADIANS, Unit.DEGREES
    )
    assert product == pytest.approx(1.0)


def test_incompatible_units():
    with pytest.raises(UnitError) as info:
        unit_factor(Unit.RADIANS, Unit.METERS)
    assert info.value.code == 1101


@pytest.mark.parametrize("inunit,outunit", [(6, 2), (2, -1), (-1, 0)])
def test_illegal_units(inunit, outunit):
    with pytest.raises(UnitError) as info:
        unit_factor(inunit, outunit)
    assert info.value.code == 5