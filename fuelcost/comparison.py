import logging
from dataclasses import dataclass
from fuelcost.const import DIESEL, ELECTRIC, EQUAL, EQUAL_EPSILON
from fuelcost.journey import CostResult

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
  diesel: CostResult
  electric: CostResult
  cheaper: str
  absolute_difference: float
  percentage_difference: float

  @property
  def savings_label(self) -> str:
    # electric is the alternative weighed against the diesel/petrol baseline
    return "Extra Cost" if self.cheaper == DIESEL else "You Save"


def compare(diesel: CostResult, electric: CostResult) -> ComparisonResult:
  diff = abs(diesel.total_cost - electric.total_cost)
  if diff <= EQUAL_EPSILON:
    cheaper = EQUAL
  elif diesel.total_cost < electric.total_cost:
    cheaper = DIESEL
  else:
    cheaper = ELECTRIC
  baseline = max(diesel.total_cost, electric.total_cost)
  pct = diff/baseline*100.0 if baseline > 0 else 0.0
  _LOGGER.debug("Comparison: cheaper=%s diff=%.4f (%.2f%%)", cheaper, diff, pct)
  return ComparisonResult(diesel, electric, cheaper, diff, pct)
