from fuelcost.const import GALLON_UK, GALLON_US, KM, KM_PER_MILE, LITRES_PER_UK_GALLON, LITRES_PER_US_GALLON, MILES
from fuelcost.inputs import parse_unit


class UnitConverter:
  @staticmethod
  def gallons_to_litres(value: float, gallon: str = GALLON_UK)->float:
    if gallon == GALLON_UK: return value*LITRES_PER_UK_GALLON
    if gallon == GALLON_US: return value*LITRES_PER_US_GALLON
    raise ValueError(f"Unknown gallon type: {gallon}")

  @staticmethod
  def distance_to_km(value: float, unit: str)->float:
    if unit == KM: return value
    if unit == MILES: return value*KM_PER_MILE
    raise ValueError(f"Unknown distance unit: {unit}")

  @staticmethod
  def distance_to_miles(value: float, unit: str)->float:
    if unit == MILES: return value
    if unit == KM: return value/KM_PER_MILE
    raise ValueError(f"Unknown distance unit: {unit}")


def unit_label(unit: str) -> str:
  return "KM" if parse_unit(unit) == KM else "Mile"

def tax_label(unit: str) -> str:
  return f"Tax per {unit_label(unit)}"
