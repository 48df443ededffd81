import pytest

from fuelcost import UnitConverter, tax_label, unit_label


def test_distance_conversions():
    assert UnitConverter.distance_to_km(100, "miles") == pytest.approx(160.934)
    assert UnitConverter.distance_to_km(100, "km") == 100
    assert UnitConverter.distance_to_miles(160.934, "km") == pytest.approx(100.0)
    assert UnitConverter.distance_to_miles(5, "miles") == 5


def test_gallons_to_litres():
    assert UnitConverter.gallons_to_litres(1) == 4.54609
    assert UnitConverter.gallons_to_litres(1, "us") == 3.78541


def test_labels_follow_unit():
    assert unit_label("miles") == "Mile"
    assert unit_label("km") == "KM"
    assert tax_label("miles") == "Tax per Mile"
    assert tax_label("km") == "Tax per KM"


def test_label_round_trip_has_no_memory():
    labels = [tax_label(u) for u in ["miles", "km", "miles"]]
    assert labels == ["Tax per Mile", "Tax per KM", "Tax per Mile"]


def test_unknown_units_raise():
    with pytest.raises(ValueError):
        UnitConverter.distance_to_km(1, "league")
    with pytest.raises(ValueError):
        UnitConverter.gallons_to_litres(1, "imperial")


@pytest.mark.parametrize("raw, expected", [
    ("KM", "Tax per KM"),
    (" kilometres ", "Tax per KM"),
    ("Miles", "Tax per Mile"),
    ("furlongs", "Tax per Mile"),
    (None, "Tax per Mile"),
])
def test_tax_label_normalizes_unit(raw, expected):
    assert tax_label(raw) == expected
