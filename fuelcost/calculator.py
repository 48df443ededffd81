import logging
from dataclasses import replace
from typing import Any, Dict
import numpy as np
import pandas as pd
from fuelcost import DieselParams, ElectricParams, TripInput, tax_label
from fuelcost.comparison import compare
from fuelcost.journey import compute_diesel_cost, compute_electric_cost

_LOGGER = logging.getLogger(__name__)


class FuelCostCalculator:
  """Turns a snapshot of the form into every derived output.

  Nothing is cached between calls: each change to any field should call
  `calculate` again with the whole snapshot.
  """

  def parse(self, payload: Dict[str, Any]):
    trip = TripInput(payload.get("distance"), payload.get("unit"))
    diesel = DieselParams(
      payload.get("mpg"), payload.get("price_per_litre"),
      payload.get("diesel_tax"), payload.get("gallon"))
    electric = ElectricParams(
      payload.get("kwh_per_100km"), payload.get("price_per_kwh"), payload.get("electric_tax"))
    return trip, diesel, electric

  def calculate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    trip, diesel_params, electric_params = self.parse(payload)
    diesel = compute_diesel_cost(trip, diesel_params)
    electric = compute_electric_cost(trip, electric_params)
    comparison = compare(diesel, electric)
    _LOGGER.debug("Calculated %.2f %s: diesel %.2f, electric %.2f",
                  trip.distance, trip.unit, diesel.total_cost, electric.total_cost)
    return {
      "trip": trip,
      "diesel": diesel,
      "electric": electric,
      "comparison": comparison,
      "tax_label": tax_label(trip.unit),
    }

  @staticmethod
  def breakdown(result: Dict[str, Any]) -> pd.DataFrame:
    rows = []
    for name, key in [("Diesel/Petrol", "diesel"), ("Electric", "electric")]:
      cost = result[key]
      rows.append({
        "fuel": name,
        "quantity": round(cost.quantity, 2),
        "unit": cost.quantity_unit,
        "fuel_cost": round(cost.fuel_cost, 2),
        "tax_cost": round(cost.tax_cost, 2),
        "total_cost": round(cost.total_cost, 2),
      })
    return pd.DataFrame(rows, columns=["fuel", "quantity", "unit", "fuel_cost", "tax_cost", "total_cost"])

  def cost_curve(self, payload: Dict[str, Any], points: int = 20) -> pd.DataFrame:
    trip, diesel_params, electric_params = self.parse(payload)
    distances = np.linspace(0.0, trip.distance, max(2, int(points)))
    diesel, electric = [], []
    for d in distances:
      leg = replace(trip, distance=float(d))
      diesel.append(compute_diesel_cost(leg, diesel_params).total_cost)
      electric.append(compute_electric_cost(leg, electric_params).total_cost)
    return pd.DataFrame({"distance": distances, "diesel": diesel, "electric": electric})
