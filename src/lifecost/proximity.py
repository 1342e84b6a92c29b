# src/lifecost/proximity.py
import math
from typing import List, Optional

from .cache import TTLCache, cache as default_cache
from .constants import DistanceUnit
from .errors import CityNotFoundError
from .schemas import NearbyCity

DEFAULT_RADIUS_MILES = 25
MILES_TO_KM = 1.60934
KM_TO_MILES = 0.621371
NEARBY_CACHE_TTL = 600  # 10 minutes
EARTH_RADIUS = {DistanceUnit.MILES: 3958.8, DistanceUnit.KILOMETERS: 6371}


def convert_distance(distance: float, from_unit: DistanceUnit, to_unit: DistanceUnit) -> float:
    if from_unit == to_unit:
        return distance
    if from_unit == DistanceUnit.MILES:
        return distance * MILES_TO_KM
    return distance * KM_TO_MILES


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit = DistanceUnit.MILES,
) -> float:
    """Great-circle distance between two points (haversine formula)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS[unit] * c


def find_nearby_cities(
    catalog,
    slug: str,
    radius: float = DEFAULT_RADIUS_MILES,
    unit: DistanceUnit = DistanceUnit.MILES,
    cache: Optional[TTLCache] = None,
) -> List[NearbyCity]:
    """
    Other catalog cities within `radius` of the city `slug`, nearest first.
    Raises CityNotFoundError for an unknown slug.
    """
    origin = catalog.get(slug)
    if origin is None:
        raise CityNotFoundError(slug)

    cache = default_cache if cache is None else cache
    radius_miles = convert_distance(radius, unit, DistanceUnit.MILES)
    cache_key = f"proximity:{catalog.version}:{slug}:{radius_miles:.4f}:{unit.value}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    nearby = []
    for city in catalog:
        if city.slug == origin.slug:
            continue
        distance = calculate_distance(origin.lat, origin.lng, city.lat, city.lng, unit)
        if distance <= radius:
            nearby.append(NearbyCity(city=city, distance=round(distance, 2), unit=unit))
    nearby.sort(key=lambda item: item.distance)

    cache.set(cache_key, nearby, ttl=NEARBY_CACHE_TTL)
    return nearby
