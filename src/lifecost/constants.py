from enum import Enum

# Share of annual income that a year of rent may take before a city is
# considered unaffordable. Policy constant, not user configurable.
AFFORDABILITY_THRESHOLD = 0.30

# Percentage change inside which a year-over-year trend counts as stable.
TREND_DEAD_BAND = 2.0
# Transit usage and car dependency move more from year to year.
TRANSIT_TREND_DEAD_BAND = 5.0

# Tolerance used when checking a stored overall score against its sub-scores.
OVERALL_SCORE_TOLERANCE = 1.0


class Priority(str, Enum):
    """
    Priority tags a user can pick when ranking cities.
    EDUCATION has no sub-score of its own; it is derived from
    the lifestyle and safety scores.
    """
    AFFORDABILITY = 'affordability'
    COMMUTE = 'commute'
    SAFETY = 'safety'
    LIFESTYLE = 'lifestyle'
    EDUCATION = 'education'


class TrendDirection(str, Enum):
    IMPROVING = 'improving'
    WORSENING = 'worsening'
    STABLE = 'stable'
    UNKNOWN = 'unknown'


class Polarity(str, Enum):
    HIGHER_IS_BETTER = 'higher'
    LOWER_IS_BETTER = 'lower'


class MetricFormat(str, Enum):
    SCORE = 'score'
    CURRENCY = 'currency'
    PERCENT = 'percent'
    TIME = 'time'


class DistanceUnit(str, Enum):
    MILES = 'miles'
    KILOMETERS = 'kilometers'


class RatingDomain(str, Enum):
    """Metrics that have a rating table, as exposed by the /ratings endpoint."""
    SAFETY = 'safety'
    TAX_BURDEN = 'tax-burden'
    SALES_TAX = 'sales-tax'
    PROPERTY_TAX = 'property-tax'
    INCOME_TAX = 'income-tax'
    COMMUTE_TIME = 'commute-time'
    CAR_DEPENDENCY = 'car-dependency'
    TRANSIT_QUALITY = 'transit-quality'
    TRAFFIC_CONGESTION = 'traffic-congestion'
    AIR_QUALITY = 'air-quality'
    PM25 = 'pm25'
    PM10 = 'pm10'
