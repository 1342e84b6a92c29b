# src/lifecost/catalog.py
"""
The city catalog: an in-memory, read-only mapping of slug to City.

The catalog is built once from either the bundled JSON dataset or the
`cities` table and handed to the engine functions, which never reach for a
data source themselves.
"""
import json
import logging
import os
import uuid
from pathlib import Path
from statistics import mean
from typing import Dict, Iterable, Iterator, List, Optional

import pycountry
from fastapi import HTTPException, status
from pydantic import TypeAdapter
from unidecode import unidecode

from . import crud
from .cache import cache
from .constants import OVERALL_SCORE_TOLERANCE
from .database import get_sessionmaker
from .errors import Err
from .schemas import City

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "cities.json"
CATALOG_SOURCE = os.getenv("CATALOG_SOURCE", "static")  # "static" or "database"
CATALOG_PATH = Path(os.getenv("CATALOG_PATH", str(DEFAULT_CATALOG_PATH)))
CATALOG_CACHE_TTL = float(os.getenv("CATALOG_CACHE_TTL", 300))

_city_list = TypeAdapter(List[City])


def normalize_name(name: str) -> str:
    return unidecode(name).lower().strip()


def state_name(code: str) -> Optional[str]:
    """Full name for a two-letter U.S. state code, e.g. 'TX' -> 'Texas'."""
    subdivision = pycountry.subdivisions.get(code=f"US-{code.upper()}")
    return subdivision.name if subdivision else None


class CityCatalog:
    """Read-only slug -> City mapping that iterates in dataset order."""

    def __init__(self, cities: Iterable[City]):
        self._cities: Dict[str, City] = {}
        for city in cities:
            if city.slug in self._cities:
                raise ValueError(f"Duplicate city slug '{city.slug}'.")
            self._cities[city.slug] = city
        # Distinguishes catalogs in cache keys.
        self.version = uuid.uuid4().hex[:8]

    def get(self, slug: str) -> Optional[City]:
        return self._cities.get(slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._cities

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities.values())

    def __len__(self) -> int:
        return len(self._cities)

    def cities(self) -> List[City]:
        return list(self._cities.values())

    def search(self, term: str, limit: int = 10) -> List[City]:
        """Cities whose name contains `term`, ignoring case and accents."""
        needle = normalize_name(term)
        matches = [city for city in self if needle in normalize_name(city.name)]
        return matches[:limit]


def validate_catalog(cities: Iterable[City]) -> List[str]:
    """
    Checks each city's stored overall score against the mean of its five
    sub-scores and returns a description of every mismatch. Stored scores
    are never changed.
    """
    issues = []
    for city in cities:
        s = city.scores
        expected = mean([s.affordability, s.jobs, s.commute, s.safety, s.lifestyle])
        if abs(s.overall - expected) > OVERALL_SCORE_TOLERANCE:
            issue = (
                f"{city.slug}: stored overall score {s.overall} differs from "
                f"sub-score average {expected:.1f}"
            )
            logger.warning("Catalog mismatch: %s", issue)
            issues.append(issue)
    return issues


def load_static_catalog(path: Path = CATALOG_PATH) -> CityCatalog:
    """Loads and validates the JSON dataset at `path`."""
    with open(path, "r", encoding="utf-8") as f:
        cities = _city_list.validate_python(json.load(f))
    validate_catalog(cities)
    logger.info("Loaded %d cities from %s", len(cities), path)
    return CityCatalog(cities)


async def load_database_catalog(db) -> CityCatalog:
    """
    Builds a catalog from the `cities` table.
    Raises HTTPException(500) when the table cannot be read.
    """
    result = await crud.get_cities(db)
    if isinstance(result, Err):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load city catalog",
        )
    validate_catalog(result.value)
    return CityCatalog(result.value)


_static_catalog: Optional[CityCatalog] = None


async def get_catalog() -> CityCatalog:
    """FastAPI dependency returning the catalog for the configured source."""
    global _static_catalog
    if CATALOG_SOURCE == "database":
        catalog = cache.get("catalog:database")
        if catalog is None:
            async with get_sessionmaker()() as session:
                catalog = await load_database_catalog(session)
            cache.set("catalog:database", catalog, ttl=CATALOG_CACHE_TTL)
        return catalog

    if _static_catalog is None:
        _static_catalog = load_static_catalog()
    return _static_catalog
