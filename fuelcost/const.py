LITRES_PER_UK_GALLON = 4.54609
LITRES_PER_US_GALLON = 3.78541
KM_PER_MILE = 1.60934

# tolerance for treating two totals as equal
EQUAL_EPSILON = 1e-9

MILES = "miles"
KM = "km"
DISTANCE_UNITS = [MILES, KM]

GALLON_UK = "uk"
GALLON_US = "us"
GALLON_TYPES = [GALLON_UK, GALLON_US]

DIESEL = "diesel"
ELECTRIC = "electric"
EQUAL = "equal"

CURRENCY_SYMBOL = "£"

PLACEHOLDERS = {
    "distance": "100",
    "mpg": "45.0",
    "price_per_litre": "1.45",
    "kwh_per_100km": "15.5",
    "price_per_kwh": "0.28",
    "tax": "0.00",
}
