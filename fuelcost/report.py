import numpy as np
from fuelcost.comparison import ComparisonResult
from fuelcost.const import CURRENCY_SYMBOL, EQUAL
from fuelcost.journey import CostResult
from fuelcost.unitconverter import unit_label

def format_currency(value: float, symbol: str = CURRENCY_SYMBOL) -> str:
  value = float(value)
  if not np.isfinite(value):
    value = 0.0
  return f"{symbol}{value:.2f}"

def format_percentage(value: float) -> str:
  value = float(value)
  if not np.isfinite(value):
    value = 0.0
  return f"{value:.1f}%"

def journey_cost_markdown(name: str, result: CostResult, unit: str) -> str:
  lines = [f"### {name} Journey Cost",
           f"**Journey Cost**: {format_currency(result.total_cost)}  ",
           f"Fuel: {format_currency(result.fuel_cost)}  ",
           f"Tax (per {unit_label(unit)}): {format_currency(result.tax_cost)}  ",
           f"Needed: {result.quantity:.2f} {result.quantity_unit}  "]
  if not result.valid:
    lines.append("_Enter an efficiency figure above zero to include the fuel cost._")
  return "\n".join(lines)

def comparison_markdown(comparison: ComparisonResult) -> str:
  savings = f"**{comparison.savings_label}**: {format_currency(comparison.absolute_difference)}"
  if comparison.cheaper != EQUAL:
    savings += f" ({format_percentage(comparison.percentage_difference)})"
  return f"""### Cost Comparison
**Diesel/Petrol**: {format_currency(comparison.diesel.total_cost)}  
**Electric**: {format_currency(comparison.electric.total_cost)}  
{savings}
"""
