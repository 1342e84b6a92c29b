from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .constants import DistanceUnit, MetricFormat, Polarity, TrendDirection

# --- City Schemas ---

class Scores(BaseModel):
    """Sub-scores on a 0-100 scale. `overall` is stored data, never recomputed."""
    affordability: float = Field(..., ge=0, le=100)
    jobs: float = Field(..., ge=0, le=100)
    commute: float = Field(..., ge=0, le=100)
    safety: float = Field(..., ge=0, le=100)
    lifestyle: float = Field(..., ge=0, le=100)
    overall: float = Field(..., ge=0, le=100)

    class Config:
        frozen = True


class City(BaseModel):
    """A city as held in the catalog."""
    slug: str = Field(..., min_length=1)
    name: str
    state: str = Field(..., min_length=2, max_length=2)
    lat: float
    lng: float
    median_income: float
    monthly_cost: float
    avg_rent: float
    commute_time: float
    crime_rate: Optional[float] = None
    amenities_score: Optional[float] = None
    scores: Scores

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "slug": "austin-tx",
                "name": "Austin",
                "state": "TX",
                "lat": 30.2672,
                "lng": -97.7431,
                "median_income": 85000,
                "monthly_cost": 3200,
                "avg_rent": 1650,
                "commute_time": 27,
                "crime_rate": 38.5,
                "amenities_score": 84,
                "scores": {
                    "affordability": 62,
                    "jobs": 88,
                    "commute": 70,
                    "safety": 66,
                    "lifestyle": 86,
                    "overall": 74.4
                }
            }
        }


class CityDisplay(City):
    """City with its full state name, for single-city responses."""
    state_name: Optional[str] = None


class RankedCity(BaseModel):
    city: City
    ranking_score: float


class CityMatches(BaseModel):
    total_candidates: int
    cities: List[RankedCity]


class NearbyCity(BaseModel):
    city: City
    distance: float
    unit: DistanceUnit

# --- Comparison Schemas ---

class ComparisonRow(BaseModel):
    key: str
    label: str
    polarity: Polarity
    format: MetricFormat
    first_value: float
    second_value: float
    first_display: str
    second_display: str
    highlight: Optional[Literal["first", "second"]] = None # None on an exact tie


class CityComparison(BaseModel):
    first: City
    second: City
    rows: List[ComparisonRow]

# --- Rating Schemas ---

class RatingBand(BaseModel):
    rating: str
    color: str
    description: str = ""

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "rating": "Very Safe",
                "color": "text-green-700 bg-green-50 border-green-200",
                "description": "Significantly below national average"
            }
        }

# --- Trend Schemas ---

class CrimeTrend(BaseModel):
    year: int
    violent_crime_rate: float
    property_crime_rate: float
    overall_crime_index: float

    class Config:
        from_attributes = True


class AirQualityTrend(BaseModel):
    year: int
    avg_annual_aqi: float
    avg_annual_pm25: float
    avg_annual_pm10: float
    good_air_days: int = 0
    unhealthy_air_days: int = 0

    class Config:
        from_attributes = True


class TransportationTrend(BaseModel):
    year: int
    avg_commute_time_minutes: float
    public_transit_usage_percent: float
    car_usage_percent: float
    car_dependency_score: float
    traffic_congestion_index: float

    class Config:
        from_attributes = True


class SafetyChange(BaseModel):
    """Percentage changes; None where the previous value was zero."""
    overall_change: Optional[float]
    violent_change: Optional[float]
    property_change: Optional[float]
    direction: TrendDirection


class AirQualityChange(BaseModel):
    aqi_change: Optional[float]
    pm25_change: Optional[float]
    pm10_change: Optional[float]
    direction: TrendDirection


class CommuteChange(BaseModel):
    commute_change: Optional[float]
    transit_usage_change: Optional[float]
    car_dependency_change: Optional[float]
    direction: TrendDirection


class SafetyTrendReport(BaseModel):
    trends: List[CrimeTrend]
    change: Optional[SafetyChange] = None


class AirQualityTrendReport(BaseModel):
    trends: List[AirQualityTrend]
    change: Optional[AirQualityChange] = None


class TransportationTrendReport(BaseModel):
    trends: List[TransportationTrend]
    change: Optional[CommuteChange] = None

# --- Tax Schemas ---

class TaxSavings(BaseModel):
    annual_savings: float
    monthly_savings: float
    percent_difference: float
    annual_savings_display: str
    monthly_savings_display: str
    percent_difference_display: str

    class Config:
        json_schema_extra = {
            "example": {
                "annual_savings": 1800.0,
                "monthly_savings": 150.0,
                "percent_difference": 25.0,
                "annual_savings_display": "$1,800",
                "monthly_savings_display": "$150",
                "percent_difference_display": "25.00%"
            }
        }
