from dataclasses import dataclass
from typing import Any
import numpy as np
from fuelcost.const import GALLON_TYPES, GALLON_UK, KM, MILES

_UNIT_ALIASES = {
  "miles": MILES, "mile": MILES, "mi": MILES,
  "km": KM, "kilometres": KM, "kilometers": KM, "kms": KM,
}

def parse_number(value: Any, default: float = 0.0) -> float:
  """Coerce a raw form value to a finite float, falling back to `default`."""
  if value is None or isinstance(value, (bool, np.bool_)):
    return default
  if isinstance(value, str):
    value = value.strip()
    if not value:
      return default
  try:
    number = float(value)
  except (TypeError, ValueError, OverflowError):
    return default
  if not np.isfinite(number):
    return default
  return number

def parse_non_negative(value: Any, default: float = 0.0) -> float:
  return max(0.0, parse_number(value, default))

def parse_unit(value: Any, default: str = MILES) -> str:
  if not isinstance(value, str):
    return default
  return _UNIT_ALIASES.get(value.strip().lower(), default)

def parse_gallon(value: Any, default: str = GALLON_UK) -> str:
  if not isinstance(value, str):
    return default
  value = value.strip().lower()
  return value if value in GALLON_TYPES else default


@dataclass(frozen=True)
class TripInput:
  distance: float
  unit: str = MILES

  def __post_init__(self):
    object.__setattr__(self, "distance", parse_non_negative(self.distance))
    object.__setattr__(self, "unit", parse_unit(self.unit))


@dataclass(frozen=True)
class DieselParams:
  mpg: float
  price_per_litre: float
  tax_per_unit: float = 0.0
  gallon: str = GALLON_UK

  def __post_init__(self):
    object.__setattr__(self, "mpg", parse_non_negative(self.mpg))
    object.__setattr__(self, "price_per_litre", parse_non_negative(self.price_per_litre))
    object.__setattr__(self, "tax_per_unit", parse_non_negative(self.tax_per_unit))
    object.__setattr__(self, "gallon", parse_gallon(self.gallon))


@dataclass(frozen=True)
class ElectricParams:
  kwh_per_100km: float
  price_per_kwh: float
  tax_per_unit: float = 0.0

  def __post_init__(self):
    object.__setattr__(self, "kwh_per_100km", parse_non_negative(self.kwh_per_100km))
    object.__setattr__(self, "price_per_kwh", parse_non_negative(self.price_per_kwh))
    object.__setattr__(self, "tax_per_unit", parse_non_negative(self.tax_per_unit))
