# src/lifecost/routers/ratings.py
from fastapi import APIRouter, Query

from .. import ratings, schemas
from ..constants import RatingDomain

router = APIRouter(
    prefix="/ratings",
    tags=["Ratings"],
)

_RATERS = {
    RatingDomain.SAFETY: ratings.get_safety_rating,
    RatingDomain.TAX_BURDEN: ratings.get_tax_burden_rating,
    RatingDomain.SALES_TAX: ratings.get_sales_tax_rating,
    RatingDomain.PROPERTY_TAX: ratings.get_property_tax_rating,
    RatingDomain.COMMUTE_TIME: ratings.get_commute_time_rating,
    RatingDomain.CAR_DEPENDENCY: ratings.get_car_dependency_rating,
    RatingDomain.TRANSIT_QUALITY: ratings.get_transit_quality_rating,
    RatingDomain.TRAFFIC_CONGESTION: ratings.get_traffic_congestion_rating,
    RatingDomain.AIR_QUALITY: ratings.get_air_quality_rating,
    RatingDomain.PM25: lambda value: ratings.get_pollutant_level(value, 'pm25'),
    RatingDomain.PM10: lambda value: ratings.get_pollutant_level(value, 'pm10'),
}

@router.get("/{domain}", response_model=schemas.RatingBand)
async def read_rating(
    domain: RatingDomain,
    value: float = Query(..., allow_inf_nan=False, description="Metric value to rate"),
    has_income_tax: bool = Query(True, description="Only used for income-tax"),
):
    """
    Rating band for a single metric value, e.g. `/ratings/air-quality?value=42`.
    """
    if domain == RatingDomain.INCOME_TAX:
        return ratings.get_income_tax_rating(value, has_income_tax)
    return _RATERS[domain](value)
