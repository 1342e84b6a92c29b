import pytest

from lifecost.constants import TrendDirection
from lifecost.schemas import AirQualityTrend, CrimeTrend, TransportationTrend
from lifecost.trends import (
    calculate_year_over_year_air_quality_change,
    calculate_year_over_year_change,
    calculate_year_over_year_commute_change,
    percent_change,
)


def _crime(year, overall, violent=400.0, prop=2000.0):
    return CrimeTrend(year=year, violent_crime_rate=violent, property_crime_rate=prop,
                      overall_crime_index=overall)


def _air(year, aqi, pm25=10.0, pm10=20.0):
    return AirQualityTrend(year=year, avg_annual_aqi=aqi, avg_annual_pm25=pm25,
                           avg_annual_pm10=pm10)


def _transport(year, commute=25.0, transit=10.0, car_dependency=60.0):
    return TransportationTrend(
        year=year,
        avg_commute_time_minutes=commute,
        public_transit_usage_percent=transit,
        car_usage_percent=75.0,
        car_dependency_score=car_dependency,
        traffic_congestion_index=40.0,
    )


def test_percent_change():
    assert percent_change(110, 100) == pytest.approx(10)
    assert percent_change(0, 0) is None


def test_crime_index_drop_is_improving():
    change = calculate_year_over_year_change([_crime(2024, 48), _crime(2023, 50)])
    assert change.overall_change == pytest.approx(-4)
    assert change.direction == TrendDirection.IMPROVING


def test_crime_index_rise_is_worsening():
    change = calculate_year_over_year_change([_crime(2024, 53), _crime(2023, 50)])
    assert change.direction == TrendDirection.WORSENING


def test_small_crime_change_is_stable():
    change = calculate_year_over_year_change([_crime(2024, 50.5), _crime(2023, 50)])
    assert change.direction == TrendDirection.STABLE


def test_crime_change_needs_two_years():
    assert calculate_year_over_year_change([_crime(2024, 48)]) is None
    assert calculate_year_over_year_change([]) is None


def test_zero_previous_value_gives_undefined_change():
    change = calculate_year_over_year_change([_crime(2024, 10, violent=5), _crime(2023, 0, violent=0)])
    assert change.overall_change is None
    assert change.violent_change is None
    assert change.property_change == pytest.approx(0)
    assert change.direction == TrendDirection.UNKNOWN


def test_air_quality_direction_follows_aqi():
    improving = calculate_year_over_year_air_quality_change([_air(2024, 40), _air(2023, 50)])
    worsening = calculate_year_over_year_air_quality_change([_air(2024, 60), _air(2023, 50)])
    assert improving.aqi_change == pytest.approx(-20)
    assert improving.direction == TrendDirection.IMPROVING
    assert worsening.direction == TrendDirection.WORSENING


def test_rising_transit_usage_is_improving():
    change = calculate_year_over_year_commute_change(
        [_transport(2024, transit=12.0), _transport(2023, transit=10.0)]
    )
    assert change.transit_usage_change == pytest.approx(20)
    assert change.direction == TrendDirection.IMPROVING


def test_longer_commute_is_worsening():
    change = calculate_year_over_year_commute_change(
        [_transport(2024, commute=27.0), _transport(2023, commute=25.0)]
    )
    assert change.commute_change == pytest.approx(8)
    assert change.direction == TrendDirection.WORSENING


def test_improving_signal_wins_over_worsening():
    change = calculate_year_over_year_commute_change(
        [_transport(2024, commute=27.0, car_dependency=50.0), _transport(2023, commute=25.0)]
    )
    assert change.direction == TrendDirection.IMPROVING


def test_small_transport_changes_are_stable():
    change = calculate_year_over_year_commute_change(
        [_transport(2024, commute=25.25, transit=10.4), _transport(2023)]
    )
    assert change.direction == TrendDirection.STABLE


def test_transport_with_all_zero_previous_values_is_unknown():
    change = calculate_year_over_year_commute_change(
        [_transport(2024), _transport(2023, commute=0, transit=0, car_dependency=0)]
    )
    assert change.direction == TrendDirection.UNKNOWN
