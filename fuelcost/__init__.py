from .unitconverter import UnitConverter, tax_label, unit_label
from .inputs import DieselParams, ElectricParams, TripInput, parse_number, parse_non_negative, parse_unit
from .journey import CostResult, compute_diesel_cost, compute_electric_cost
from .comparison import ComparisonResult, compare
from .calculator import FuelCostCalculator
from .report import comparison_markdown, format_currency, format_percentage, journey_cost_markdown
