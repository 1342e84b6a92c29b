# src/lifecost/routers/compare.py
from fastapi import APIRouter, Depends, HTTPException, Query, status

from .. import comparison, schemas
from ..catalog import CityCatalog, get_catalog
from ..errors import CityNotFoundError, InvalidInputError

router = APIRouter(
    prefix="/compare",
    tags=["Compare"],
    responses={404: {"description": "Not found"}},
)

@router.get("/", response_model=schemas.CityComparison)
async def compare_cities(
    city1: str = Query(..., min_length=1, description="Slug of the first city"),
    city2: str = Query(..., min_length=1, description="Slug of the second city"),
    catalog: CityCatalog = Depends(get_catalog)
):
    """
    Side-by-side metrics for two cities. Each row marks which city wins
    that metric, or neither on a tie.
    """
    try:
        return comparison.compare_by_slug(catalog, city1, city2)
    except CityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
