import pytest

from fuelcost import DieselParams, ElectricParams, FuelCostCalculator, TripInput


@pytest.fixture
def trip():
    return TripInput(distance=100.0, unit="miles")


@pytest.fixture
def diesel_params():
    return DieselParams(mpg=45.0, price_per_litre=1.45, tax_per_unit=0.05)


@pytest.fixture
def electric_params():
    return ElectricParams(kwh_per_100km=15.5, price_per_kwh=0.28, tax_per_unit=0.03)


@pytest.fixture
def calculator():
    return FuelCostCalculator()


@pytest.fixture
def payload():
    return {
        "distance": "100",
        "unit": "miles",
        "mpg": "45",
        "gallon": "uk",
        "price_per_litre": "1.45",
        "diesel_tax": "0.05",
        "kwh_per_100km": "15.5",
        "price_per_kwh": "0.28",
        "electric_tax": "0.03",
    }
