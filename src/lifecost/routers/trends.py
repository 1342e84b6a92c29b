# src/lifecost/routers/trends.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import crud, schemas, trends
from ..database import get_db
from ..errors import Err, ErrorKind, Result

router = APIRouter(
    prefix="/trends",
    tags=["Trends"],
    responses={404: {"description": "Not found"}},
)


def unwrap(result: Result, what: str):
    """Returns the value of an Ok result or raises the matching HTTP error."""
    if isinstance(result, Err):
        if result.kind == ErrorKind.NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch {what} data",
        )
    return result.value

@router.get("/safety/{slug}", response_model=schemas.SafetyTrendReport)
async def read_safety_trends(
    slug: str,
    years_back: int = Query(5, ge=1, le=50),
    db: AsyncSession = Depends(get_db)
):
    """
    Yearly crime statistics for a city, newest first, and the change
    between the two latest years.
    """
    series = unwrap(await crud.get_crime_trends(db, slug, years_back), "safety")
    return schemas.SafetyTrendReport(
        trends=series, change=trends.calculate_year_over_year_change(series)
    )

@router.get("/air-quality/{slug}", response_model=schemas.AirQualityTrendReport)
async def read_air_quality_trends(
    slug: str,
    years_back: int = Query(5, ge=1, le=50),
    db: AsyncSession = Depends(get_db)
):
    series = unwrap(await crud.get_air_quality_trends(db, slug, years_back), "air quality")
    return schemas.AirQualityTrendReport(
        trends=series, change=trends.calculate_year_over_year_air_quality_change(series)
    )

@router.get("/transportation/{slug}", response_model=schemas.TransportationTrendReport)
async def read_transportation_trends(
    slug: str,
    years_back: int = Query(5, ge=1, le=50),
    db: AsyncSession = Depends(get_db)
):
    series = unwrap(await crud.get_transportation_trends(db, slug, years_back), "transportation")
    return schemas.TransportationTrendReport(
        trends=series, change=trends.calculate_year_over_year_commute_change(series)
    )
