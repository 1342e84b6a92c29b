# src/lifecost/crud.py
import logging
from typing import List, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from . import models
from . import schemas
from .errors import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

# Raised by the driver when the server cannot be reached at all.
DATABASE_ERRORS = (SQLAlchemyError, OSError)


def city_from_row(row: models.City) -> schemas.City:
    """Maps a `cities` row onto the catalog's City record."""
    return schemas.City(
        slug=row.slug,
        name=row.name,
        state=row.state,
        lat=row.latitude,
        lng=row.longitude,
        median_income=row.median_income,
        monthly_cost=row.monthly_cost,
        avg_rent=row.avg_rent,
        commute_time=row.commute_time,
        crime_rate=row.crime_rate,
        amenities_score=row.amenities_score,
        scores=schemas.Scores(
            affordability=row.affordability_score,
            jobs=row.jobs_score,
            commute=row.commute_score,
            safety=row.safety_score,
            lifestyle=row.lifestyle_score,
            overall=row.overall_score,
        ),
    )

# --- City CRUD ---

async def get_cities(db: AsyncSession) -> Result[List[schemas.City]]:
    """
    Retrieves every city, ordered by id so the catalog order is stable.

    Returns:
        Ok with the list of cities (possibly empty), or Err(FETCH_FAILED).
    """
    try:
        result = await db.execute(select(models.City).order_by(models.City.id))
        rows = result.scalars().all()
    except DATABASE_ERRORS as e:
        logger.exception("Error fetching cities")
        return Err(ErrorKind.FETCH_FAILED, str(e))
    return Ok([city_from_row(row) for row in rows])


async def get_city_by_slug(db: AsyncSession, slug: str) -> Result[schemas.City]:
    """
    Retrieves a specific city by its slug.

    Returns:
        Ok with the city, Err(NOT_FOUND) if no such city exists,
        or Err(FETCH_FAILED) if the query failed.
    """
    try:
        result = await db.execute(select(models.City).filter(models.City.slug == slug))
        row = result.scalars().first()
    except DATABASE_ERRORS as e:
        logger.exception("Error fetching city %s", slug)
        return Err(ErrorKind.FETCH_FAILED, str(e))
    if row is None:
        return Err(ErrorKind.NOT_FOUND, f"City '{slug}' not found.")
    return Ok(city_from_row(row))

# --- Yearly statistics ---

async def _get_trends(
    db: AsyncSession,
    model: Type[models.Base],
    schema: Type[schemas.BaseModel],
    slug: str,
    years_back: int,
    label: str,
) -> Result[list]:
    """Latest `years_back` yearly rows of `model` for a city, newest first."""
    try:
        result = await db.execute(
            select(model)
            .join(models.City, model.city_id == models.City.id)
            .filter(models.City.slug == slug)
            .order_by(model.year.desc())
            .limit(years_back)
        )
        rows = result.scalars().all()
    except DATABASE_ERRORS as e:
        logger.exception("Error fetching %s trends for %s", label, slug)
        return Err(ErrorKind.FETCH_FAILED, str(e))
    if not rows:
        return Err(ErrorKind.NOT_FOUND, f"No {label} data for city '{slug}'.")
    return Ok([schema.model_validate(row) for row in rows])


async def get_crime_trends(
    db: AsyncSession, slug: str, years_back: int = 5
) -> Result[List[schemas.CrimeTrend]]:
    return await _get_trends(db, models.CrimeStat, schemas.CrimeTrend, slug, years_back, "crime")


async def get_air_quality_trends(
    db: AsyncSession, slug: str, years_back: int = 5
) -> Result[List[schemas.AirQualityTrend]]:
    return await _get_trends(
        db, models.AirQualityStat, schemas.AirQualityTrend, slug, years_back, "air quality"
    )


async def get_transportation_trends(
    db: AsyncSession, slug: str, years_back: int = 5
) -> Result[List[schemas.TransportationTrend]]:
    return await _get_trends(
        db, models.TransportationStat, schemas.TransportationTrend, slug, years_back, "transportation"
    )
