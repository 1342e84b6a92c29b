# src/lifecost/routers/cities.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from .. import schemas, scoring, proximity # Use .. for relative imports
from ..catalog import CityCatalog, get_catalog, state_name
from ..constants import DistanceUnit
from ..errors import CityNotFoundError, InvalidInputError

router = APIRouter(
    prefix="/cities",  # All routes in this router will start with /cities
    tags=["Cities"],    # Tag for API documentation
    responses={404: {"description": "Not found"}}, # Default response for this router
)

@router.get("/", response_model=List[schemas.City])
async def read_cities(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    catalog: CityCatalog = Depends(get_catalog)
):
    """
    Retrieve a list of cities in catalog order.
    Users can paginate through the list using `skip` and `limit` query parameters.
    """
    return catalog.cities()[skip:skip + limit]

@router.get("/search", response_model=List[schemas.City])
async def search_cities(
    q: str = Query(..., min_length=1, description="Part of a city name"),
    limit: int = Query(10, ge=1, le=50),
    catalog: CityCatalog = Depends(get_catalog)
):
    """
    Find cities by name. Matching ignores case and accents.
    """
    return catalog.search(q, limit=limit)

@router.get("/match", response_model=schemas.CityMatches)
async def match_cities(
    income: float = Query(..., allow_inf_nan=False, description="Annual household income"),
    max_rent: float = Query(..., allow_inf_nan=False, description="Highest acceptable monthly rent"),
    max_commute: Optional[float] = Query(None, allow_inf_nan=False, description="Longest acceptable commute, minutes"),
    min_safety: Optional[float] = Query(None, ge=0, le=100, allow_inf_nan=False),
    priorities: str = Query("", description="Comma-separated priorities, e.g. affordability,safety"),
    limit: int = Query(6, ge=1, le=100),
    catalog: CityCatalog = Depends(get_catalog)
):
    """
    Cities that fit the given budget, best match first.

    - **income**: annual income; a year of rent must stay within 30% of it.
    - **max_rent**: monthly rent ceiling.
    - **priorities**: any of affordability, commute, safety, lifestyle, education.
    """
    tags = [tag for tag in priorities.split(",") if tag.strip()]
    try:
        candidates = scoring.filter_cities(
            catalog, income=income, max_rent=max_rent,
            max_commute=max_commute, min_safety=min_safety,
        )
        ranked = scoring.rank_cities_with_scores(candidates, tags)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return schemas.CityMatches(
        total_candidates=len(candidates),
        cities=[
            schemas.RankedCity(city=city, ranking_score=score)
            for city, score in ranked[:limit]
        ],
    )

@router.get("/{slug}", response_model=schemas.CityDisplay)
async def read_city(
    slug: str,
    catalog: CityCatalog = Depends(get_catalog)
):
    """
    Retrieve details for a specific city by its slug.
    """
    city = catalog.get(slug)
    if city is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="City not found")
    return schemas.CityDisplay(**city.model_dump(), state_name=state_name(city.state))

@router.get("/{slug}/nearby", response_model=List[schemas.NearbyCity])
async def read_nearby_cities(
    slug: str,
    radius: float = Query(proximity.DEFAULT_RADIUS_MILES, gt=0, allow_inf_nan=False),
    unit: DistanceUnit = DistanceUnit.MILES,
    catalog: CityCatalog = Depends(get_catalog)
):
    """
    Other cities within `radius` of this one, nearest first.
    """
    try:
        return proximity.find_nearby_cities(catalog, slug, radius=radius, unit=unit)
    except CityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
