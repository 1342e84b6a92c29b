# src/lifecost/trends.py
"""
Year-over-year change for the yearly statistics series.

Every series is ordered newest first: index 0 is the latest year, index 1
the year before. A series with fewer than two entries has no change.
"""
from typing import Optional, Sequence

from .constants import TRANSIT_TREND_DEAD_BAND, TREND_DEAD_BAND, TrendDirection
from .schemas import (
    AirQualityChange,
    AirQualityTrend,
    CommuteChange,
    CrimeTrend,
    SafetyChange,
    TransportationTrend,
)


def percent_change(latest: float, previous: float) -> Optional[float]:
    """
    Percentage change from `previous` to `latest`.
    Returns None when `previous` is zero, since the change is undefined.
    """
    if previous == 0:
        return None
    return (latest - previous) / previous * 100


def direction_for(change: Optional[float], dead_band: float = TREND_DEAD_BAND) -> TrendDirection:
    """Direction for a metric where a falling value is an improvement."""
    if change is None:
        return TrendDirection.UNKNOWN
    if change < -dead_band:
        return TrendDirection.IMPROVING
    if change > dead_band:
        return TrendDirection.WORSENING
    return TrendDirection.STABLE


def calculate_year_over_year_change(trends: Sequence[CrimeTrend]) -> Optional[SafetyChange]:
    if len(trends) < 2:
        return None
    latest, previous = trends[0], trends[1]

    overall_change = percent_change(latest.overall_crime_index, previous.overall_crime_index)
    return SafetyChange(
        overall_change=overall_change,
        violent_change=percent_change(latest.violent_crime_rate, previous.violent_crime_rate),
        property_change=percent_change(latest.property_crime_rate, previous.property_crime_rate),
        direction=direction_for(overall_change),
    )


def calculate_year_over_year_air_quality_change(
    trends: Sequence[AirQualityTrend],
) -> Optional[AirQualityChange]:
    if len(trends) < 2:
        return None
    latest, previous = trends[0], trends[1]

    aqi_change = percent_change(latest.avg_annual_aqi, previous.avg_annual_aqi)
    return AirQualityChange(
        aqi_change=aqi_change,
        pm25_change=percent_change(latest.avg_annual_pm25, previous.avg_annual_pm25),
        pm10_change=percent_change(latest.avg_annual_pm10, previous.avg_annual_pm10),
        direction=direction_for(aqi_change),
    )


def calculate_year_over_year_commute_change(
    trends: Sequence[TransportationTrend],
) -> Optional[CommuteChange]:
    """
    Commute trend. Shorter commutes and lower car dependency are improvements,
    as is a rise in public transit usage. Any single improving signal wins
    over a worsening one.
    """
    if len(trends) < 2:
        return None
    latest, previous = trends[0], trends[1]

    commute_change = percent_change(
        latest.avg_commute_time_minutes, previous.avg_commute_time_minutes
    )
    transit_usage_change = percent_change(
        latest.public_transit_usage_percent, previous.public_transit_usage_percent
    )
    car_dependency_change = percent_change(
        latest.car_dependency_score, previous.car_dependency_score
    )

    signals = [
        direction_for(commute_change),
        # Transit usage is inverted: more riders is better.
        direction_for(
            -transit_usage_change if transit_usage_change is not None else None,
            TRANSIT_TREND_DEAD_BAND,
        ),
        direction_for(car_dependency_change, TRANSIT_TREND_DEAD_BAND),
    ]

    if TrendDirection.IMPROVING in signals:
        direction = TrendDirection.IMPROVING
    elif TrendDirection.WORSENING in signals:
        direction = TrendDirection.WORSENING
    elif all(signal == TrendDirection.UNKNOWN for signal in signals):
        direction = TrendDirection.UNKNOWN
    else:
        direction = TrendDirection.STABLE

    return CommuteChange(
        commute_change=commute_change,
        transit_usage_change=transit_usage_change,
        car_dependency_change=car_dependency_change,
        direction=direction,
    )
