# src/lifecost/scoring.py
"""
Filtering and priority ranking of catalog cities.

Both operations are pure: they never mutate the cities they are given and
return new lists.
"""
import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .constants import AFFORDABILITY_THRESHOLD, Priority
from .errors import InvalidInputError
from .schemas import City

logger = logging.getLogger(__name__)


def rent_to_income_ratio(avg_rent: float, annual_income: float) -> float:
    """Share of annual income spent on a year of rent."""
    if not math.isfinite(annual_income) or annual_income <= 0:
        raise InvalidInputError("Income must be greater than zero.")
    return (avg_rent * 12) / annual_income


def filter_cities(
    cities: Iterable[City],
    income: float,
    max_rent: float,
    max_commute: Optional[float] = None,
    min_safety: Optional[float] = None,
) -> List[City]:
    """
    Returns the cities a household can afford, in the order given.

    A city passes when all of these hold:
    - its average rent is at most `max_rent`;
    - a year of rent is at most 30% of `income`;
    - its commute time is at most `max_commute`, if given;
    - its safety score is at least `min_safety`, if given.

    Raises InvalidInputError when `income` is not a positive finite number
    or `max_rent` is not finite.
    """
    if not math.isfinite(income) or income <= 0:
        raise InvalidInputError("Income must be a finite number greater than zero.")
    if not math.isfinite(max_rent):
        raise InvalidInputError("Maximum rent must be a finite number.")
    for name, limit in (("max_commute", max_commute), ("min_safety", min_safety)):
        if limit is not None and not math.isfinite(limit):
            raise InvalidInputError(f"{name} must be a finite number.")

    matches = []
    for city in cities:
        if city.avg_rent > max_rent:
            continue
        if rent_to_income_ratio(city.avg_rent, income) > AFFORDABILITY_THRESHOLD:
            continue
        if max_commute is not None and city.commute_time > max_commute:
            continue
        if min_safety is not None and city.scores.safety < min_safety:
            continue
        matches.append(city)
    return matches


def parse_priorities(priorities: Iterable[Union[str, Priority]]) -> List[Priority]:
    """
    Converts raw tags to Priority members, dropping repeats but keeping order.
    Raises InvalidInputError for a tag that is not a known priority.
    """
    parsed: List[Priority] = []
    for tag in priorities:
        try:
            priority = Priority(tag.strip().lower() if isinstance(tag, str) else tag)
        except ValueError:
            raise InvalidInputError(f"Unknown priority '{tag}'.")
        if priority not in parsed:
            parsed.append(priority)
    return parsed


def priority_score(city: City, priorities: Sequence[Priority]) -> float:
    """Sum of the sub-scores selected by `priorities`."""
    scores = city.scores
    total = 0.0
    for priority in priorities:
        if priority == Priority.AFFORDABILITY:
            total += scores.affordability
        elif priority == Priority.COMMUTE:
            total += scores.commute
        elif priority == Priority.SAFETY:
            total += scores.safety
        elif priority == Priority.LIFESTYLE:
            total += scores.lifestyle
        elif priority == Priority.EDUCATION:
            # No dedicated education score in the catalog.
            total += (scores.lifestyle + scores.safety) / 2
    return total


def rank_cities_with_scores(
    cities: Iterable[City],
    priorities: Iterable[Union[str, Priority]],
) -> List[Tuple[City, float]]:
    """
    Pairs each city with its priority score, best first.
    The sort is stable, so equal scores keep their input order and an empty
    priority list returns the cities unchanged.
    """
    selected = parse_priorities(priorities)
    scored = [(city, priority_score(city, selected)) for city in cities]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    logger.debug("Ranked %d cities by %s", len(scored), [p.value for p in selected])
    return scored


def rank_cities(
    cities: Iterable[City],
    priorities: Iterable[Union[str, Priority]],
) -> List[City]:
    return [city for city, _ in rank_cities_with_scores(cities, priorities)]
