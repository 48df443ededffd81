import logging
from dataclasses import dataclass
import numpy as np
from fuelcost import DieselParams, ElectricParams, TripInput, UnitConverter

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostResult:
  fuel_cost: float
  tax_cost: float
  total_cost: float
  quantity: float = 0.0
  quantity_unit: str = ""
  valid: bool = True

  @classmethod
  def build(cls, fuel_cost: float, tax_cost: float, quantity: float, quantity_unit: str, valid: bool = True) -> "CostResult":
    if not np.isfinite(fuel_cost):
      _LOGGER.warning("Fuel cost overflowed; set to 0")
      valid = False
    fuel_cost = _finite(fuel_cost)
    tax_cost = _finite(tax_cost)
    return cls(fuel_cost, tax_cost, fuel_cost + tax_cost, _finite(quantity), quantity_unit, valid)


def _finite(value: float) -> float:
  value = float(value)
  if not np.isfinite(value) or value < 0:
    return 0.0
  return value

def distance_tax(trip: TripInput, tax_per_unit: float) -> float:
  # charged per entered unit, so a km trip reads tax_per_unit as per-km
  return trip.distance*tax_per_unit

def compute_diesel_cost(trip: TripInput, params: DieselParams) -> CostResult:
  tax = distance_tax(trip, params.tax_per_unit)
  if params.mpg <= 0:
    _LOGGER.warning("Fuel efficiency is %s mpg; diesel fuel cost set to 0", params.mpg)
    return CostResult.build(0.0, tax, 0.0, "L", valid=False)
  miles = UnitConverter.distance_to_miles(trip.distance, trip.unit)
  litres = UnitConverter.gallons_to_litres(miles/params.mpg, params.gallon)
  fuel = litres*params.price_per_litre
  _LOGGER.debug("Diesel: %.3f miles, %.3f L, fuel %.4f, tax %.4f", miles, litres, fuel, tax)
  return CostResult.build(fuel, tax, litres, "L")

def compute_electric_cost(trip: TripInput, params: ElectricParams) -> CostResult:
  tax = distance_tax(trip, params.tax_per_unit)
  if params.kwh_per_100km <= 0:
    _LOGGER.warning("Consumption is %s kWh/100km; electric energy cost set to 0", params.kwh_per_100km)
    return CostResult.build(0.0, tax, 0.0, "kWh", valid=False)
  km = UnitConverter.distance_to_km(trip.distance, trip.unit)
  kwh = (km/100.0)*params.kwh_per_100km
  fuel = kwh*params.price_per_kwh
  _LOGGER.debug("Electric: %.3f km, %.3f kWh, energy %.4f, tax %.4f", km, kwh, fuel, tax)
  return CostResult.build(fuel, tax, kwh, "kWh")
