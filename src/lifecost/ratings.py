# src/lifecost/ratings.py
"""
Rating bands for city metrics.

Every helper buckets a single number against a fixed threshold table and
returns a RatingBand. Tables are ordered; the first satisfied bound wins and
a value past every bound falls into the table's last band.
"""
import math
from typing import List, Tuple

from .errors import InvalidInputError
from .schemas import RatingBand

GREEN = 'text-green-700 bg-green-50 border-green-200'
BLUE = 'text-blue-700 bg-blue-50 border-blue-200'
YELLOW = 'text-yellow-700 bg-yellow-50 border-yellow-200'
ORANGE = 'text-orange-700 bg-orange-50 border-orange-200'
RED = 'text-red-700 bg-red-50 border-red-200'


class ThresholdTable:
    """
    Ordered (bound, band) pairs plus the band for values beyond all bounds.

    With `lower_bounds=False` (the default) each bound is an inclusive upper
    bound and the table must be sorted ascending. With `lower_bounds=True`
    each bound is an inclusive lower bound and the table is sorted descending.
    """

    def __init__(
        self,
        bands: List[Tuple[float, RatingBand]],
        otherwise: RatingBand,
        lower_bounds: bool = False,
    ):
        self.bands = bands
        self.otherwise = otherwise
        self.lower_bounds = lower_bounds

    def rate(self, value: float) -> RatingBand:
        if math.isnan(value):
            raise InvalidInputError("Cannot rate a NaN value.")
        for bound, band in self.bands:
            if self.lower_bounds and value >= bound:
                return band
            if not self.lower_bounds and value <= bound:
                return band
        return self.otherwise


def _band(rating: str, color: str, description: str = "") -> RatingBand:
    return RatingBand(rating=rating, color=color, description=description)

# --- Safety ---

SAFETY_TABLE = ThresholdTable(
    [
        (20, _band('Very Safe', GREEN, 'Significantly below national average')),
        (40, _band('Safe', BLUE, 'Below national average')),
        (60, _band('Moderate', YELLOW, 'Near national average')),
        (80, _band('Elevated', ORANGE, 'Above national average')),
    ],
    _band('High', RED, 'Significantly above national average'),
)


def get_safety_rating(crime_index: float) -> RatingBand:
    return SAFETY_TABLE.rate(crime_index)

# --- Taxes ---

TAX_BURDEN_TABLE = ThresholdTable(
    [
        (7, _band('Very Low', GREEN, 'Below average tax burden')),
        (9, _band('Low', BLUE, 'Relatively low tax burden')),
        (11, _band('Moderate', YELLOW, 'Average tax burden')),
        (13, _band('High', ORANGE, 'Above average tax burden')),
    ],
    _band('Very High', RED, 'Significantly high tax burden'),
)

NO_SALES_TAX = _band('No Sales Tax', 'text-green-700')
SALES_TAX_TABLE = ThresholdTable(
    [
        (5, _band('Very Low', 'text-green-700')),
        (7, _band('Low', 'text-blue-700')),
        (9, _band('Moderate', 'text-yellow-700')),
        (10, _band('High', 'text-orange-700')),
    ],
    _band('Very High', 'text-red-700'),
)

PROPERTY_TAX_TABLE = ThresholdTable(
    [
        (0.5, _band('Very Low', 'text-green-700')),
        (1.0, _band('Low', 'text-blue-700')),
        (1.5, _band('Moderate', 'text-yellow-700')),
        (2.0, _band('High', 'text-orange-700')),
    ],
    _band('Very High', 'text-red-700'),
)

NO_INCOME_TAX = _band('No Income Tax', 'text-green-700')
INCOME_TAX_TABLE = ThresholdTable(
    [
        (3, _band('Very Low', 'text-green-700')),
        (5, _band('Low', 'text-blue-700')),
        (7, _band('Moderate', 'text-yellow-700')),
        (9, _band('High', 'text-orange-700')),
    ],
    _band('Very High', 'text-red-700'),
)


def get_tax_burden_rating(percent: float) -> RatingBand:
    return TAX_BURDEN_TABLE.rate(percent)


def get_sales_tax_rating(percent: float) -> RatingBand:
    if percent == 0:
        return NO_SALES_TAX
    return SALES_TAX_TABLE.rate(percent)


def get_property_tax_rating(percent: float) -> RatingBand:
    return PROPERTY_TAX_TABLE.rate(percent)


def get_income_tax_rating(percent: float, has_income_tax: bool = True) -> RatingBand:
    if not has_income_tax or percent == 0:
        return NO_INCOME_TAX
    return INCOME_TAX_TABLE.rate(percent)

# --- Transportation ---

COMMUTE_TIME_TABLE = ThresholdTable(
    [
        (20, _band('Excellent', GREEN, 'Very short commute')),
        (30, _band('Good', BLUE, 'Reasonable commute time')),
        (40, _band('Moderate', YELLOW, 'Average commute time')),
        (50, _band('Long', ORANGE, 'Above average commute')),
    ],
    _band('Very Long', RED, 'Lengthy commute time'),
)

CAR_DEPENDENCY_TABLE = ThresholdTable(
    [
        (30, _band('Low Dependency', 'text-green-700', 'Excellent transportation options')),
        (50, _band('Moderate Dependency', 'text-blue-700', 'Good alternative options')),
        (70, _band('High Dependency', 'text-orange-700', 'Limited alternatives')),
    ],
    _band('Very High Dependency', 'text-red-700', 'Car essential for most trips'),
)

# Higher transit quality is better, so this table uses lower bounds.
TRANSIT_QUALITY_TABLE = ThresholdTable(
    [
        (80, _band('Excellent', 'text-green-700')),
        (60, _band('Good', 'text-blue-700')),
        (40, _band('Fair', 'text-yellow-700')),
        (20, _band('Poor', 'text-orange-700')),
    ],
    _band('Very Poor', 'text-red-700'),
    lower_bounds=True,
)

TRAFFIC_CONGESTION_TABLE = ThresholdTable(
    [
        (20, _band('Minimal', 'text-green-700')),
        (40, _band('Light', 'text-blue-700')),
        (60, _band('Moderate', 'text-yellow-700')),
        (80, _band('Heavy', 'text-orange-700')),
    ],
    _band('Severe', 'text-red-700'),
)


def get_commute_time_rating(minutes: float) -> RatingBand:
    return COMMUTE_TIME_TABLE.rate(minutes)


def get_car_dependency_rating(score: float) -> RatingBand:
    return CAR_DEPENDENCY_TABLE.rate(score)


def get_transit_quality_rating(score: float) -> RatingBand:
    return TRANSIT_QUALITY_TABLE.rate(score)


def get_traffic_congestion_rating(index: float) -> RatingBand:
    return TRAFFIC_CONGESTION_TABLE.rate(index)

# --- Air quality ---

AIR_QUALITY_TABLE = ThresholdTable(
    [
        (50, _band('Good', GREEN, 'Air quality is satisfactory')),
        (100, _band('Moderate', YELLOW, 'Acceptable air quality')),
        (150, _band('Unhealthy for Sensitive Groups', ORANGE, 'May affect sensitive individuals')),
        (200, _band('Unhealthy', RED, 'Everyone may experience health effects')),
        (300, _band('Very Unhealthy', 'text-red-800 bg-red-100 border-red-300',
                    'Health alert: serious effects for everyone')),
    ],
    _band('Hazardous', 'text-red-900 bg-red-200 border-red-400',
          'Emergency conditions: everyone affected'),
)


def _pollutant_table(bounds: List[float]) -> ThresholdTable:
    labels = [
        ('Good', 'text-green-700'),
        ('Moderate', 'text-yellow-700'),
        ('Unhealthy (Sensitive)', 'text-orange-700'),
        ('Unhealthy', 'text-red-700'),
        ('Very Unhealthy', 'text-red-800'),
    ]
    return ThresholdTable(
        [(bound, _band(label, color)) for bound, (label, color) in zip(bounds, labels)],
        _band('Hazardous', 'text-red-900'),
    )


PM25_TABLE = _pollutant_table([12, 35.4, 55.4, 150.4, 250.4])
PM10_TABLE = _pollutant_table([54, 154, 254, 354, 424])


def get_air_quality_rating(aqi: float) -> RatingBand:
    return AIR_QUALITY_TABLE.rate(aqi)


def get_pollutant_level(value: float, pollutant: str) -> RatingBand:
    """`pollutant` is 'pm25' or 'pm10'."""
    if pollutant == 'pm25':
        return PM25_TABLE.rate(value)
    if pollutant == 'pm10':
        return PM10_TABLE.rate(value)
    raise InvalidInputError(f"Unknown pollutant '{pollutant}'.")
