# src/lifecost/comparison.py
"""
Side-by-side comparison of two cities.

Each metric carries a polarity. The city that wins under that polarity is
highlighted; an exact tie highlights neither side.
"""
from typing import Callable, List, NamedTuple, Optional

from .constants import MetricFormat, Polarity
from .errors import CityNotFoundError, InvalidInputError
from .formatting import format_metric
from .schemas import City, CityComparison, ComparisonRow


class Metric(NamedTuple):
    key: str
    label: str
    polarity: Polarity
    format: MetricFormat
    value: Callable[[City], float]


def rent_ratio_percent(city: City) -> float:
    """A year of rent as a percentage of the city's median income."""
    if city.median_income <= 0:
        raise InvalidInputError(f"City '{city.slug}' has no positive median income.")
    return (city.avg_rent * 12) / city.median_income * 100


HIGHER = Polarity.HIGHER_IS_BETTER
LOWER = Polarity.LOWER_IS_BETTER

METRICS: List[Metric] = [
    Metric('overall', 'Overall Score', HIGHER, MetricFormat.SCORE, lambda c: c.scores.overall),
    Metric('monthly_cost', 'Monthly Cost', LOWER, MetricFormat.CURRENCY, lambda c: c.monthly_cost),
    Metric('median_income', 'Median Income', HIGHER, MetricFormat.CURRENCY, lambda c: c.median_income),
    Metric('avg_rent', 'Average Rent', LOWER, MetricFormat.CURRENCY, lambda c: c.avg_rent),
    Metric('rent_ratio', 'Rent-to-Income %', LOWER, MetricFormat.PERCENT, rent_ratio_percent),
    Metric('commute_time', 'Commute Time', LOWER, MetricFormat.TIME, lambda c: c.commute_time),
    Metric('affordability', 'Affordability Score', HIGHER, MetricFormat.SCORE, lambda c: c.scores.affordability),
    Metric('jobs', 'Jobs Score', HIGHER, MetricFormat.SCORE, lambda c: c.scores.jobs),
    Metric('commute', 'Commute Score', HIGHER, MetricFormat.SCORE, lambda c: c.scores.commute),
    Metric('safety', 'Safety Score', HIGHER, MetricFormat.SCORE, lambda c: c.scores.safety),
    Metric('lifestyle', 'Lifestyle Score', HIGHER, MetricFormat.SCORE, lambda c: c.scores.lifestyle),
]


def pick_winner(first: float, second: float, polarity: Polarity) -> Optional[str]:
    """Returns 'first', 'second', or None on a tie."""
    if first == second:
        return None
    first_wins = first > second if polarity == Polarity.HIGHER_IS_BETTER else first < second
    return "first" if first_wins else "second"


def compare_cities(first: City, second: City) -> CityComparison:
    rows = []
    for metric in METRICS:
        first_value = metric.value(first)
        second_value = metric.value(second)
        rows.append(ComparisonRow(
            key=metric.key,
            label=metric.label,
            polarity=metric.polarity,
            format=metric.format,
            first_value=first_value,
            second_value=second_value,
            first_display=format_metric(first_value, metric.format),
            second_display=format_metric(second_value, metric.format),
            highlight=pick_winner(first_value, second_value, metric.polarity),
        ))
    return CityComparison(first=first, second=second, rows=rows)


def compare_by_slug(catalog, first_slug: str, second_slug: str) -> CityComparison:
    """
    Looks both cities up in `catalog` and compares them.
    Raises CityNotFoundError for an unknown slug.
    """
    first = catalog.get(first_slug)
    if first is None:
        raise CityNotFoundError(first_slug)
    second = catalog.get(second_slug)
    if second is None:
        raise CityNotFoundError(second_slug)
    return compare_cities(first, second)
