import pytest

from lifecost.errors import InvalidInputError
from lifecost.ratings import (
    get_air_quality_rating,
    get_car_dependency_rating,
    get_commute_time_rating,
    get_income_tax_rating,
    get_pollutant_level,
    get_property_tax_rating,
    get_safety_rating,
    get_sales_tax_rating,
    get_tax_burden_rating,
    get_traffic_congestion_rating,
    get_transit_quality_rating,
)


@pytest.mark.parametrize("crime_index,expected", [
    (0, "Very Safe"),
    (19, "Very Safe"),
    (20, "Very Safe"),
    (21, "Safe"),
    (40, "Safe"),
    (60, "Moderate"),
    (80, "Elevated"),
    (80.5, "High"),
    (150, "High"),
])
def test_safety_rating_bands(crime_index, expected):
    assert get_safety_rating(crime_index).rating == expected


def test_safety_rating_carries_color_and_description():
    band = get_safety_rating(10)
    assert band.color == "text-green-700 bg-green-50 border-green-200"
    assert band.description == "Significantly below national average"


@pytest.mark.parametrize("aqi,expected", [
    (50, "Good"),
    (51, "Moderate"),
    (100, "Moderate"),
    (150, "Unhealthy for Sensitive Groups"),
    (200, "Unhealthy"),
    (300, "Very Unhealthy"),
    (301, "Hazardous"),
])
def test_air_quality_rating_bands(aqi, expected):
    assert get_air_quality_rating(aqi).rating == expected


@pytest.mark.parametrize("percent,expected", [
    (7, "Very Low"), (8, "Low"), (11, "Moderate"), (13, "High"), (13.1, "Very High"),
])
def test_tax_burden_rating_bands(percent, expected):
    assert get_tax_burden_rating(percent).rating == expected


@pytest.mark.parametrize("minutes,expected", [
    (20, "Excellent"), (25, "Good"), (40, "Moderate"), (50, "Long"), (51, "Very Long"),
])
def test_commute_time_rating_bands(minutes, expected):
    assert get_commute_time_rating(minutes).rating == expected


@pytest.mark.parametrize("score,expected", [
    (30, "Low Dependency"), (50, "Moderate Dependency"), (70, "High Dependency"),
    (71, "Very High Dependency"),
])
def test_car_dependency_rating_bands(score, expected):
    assert get_car_dependency_rating(score).rating == expected


@pytest.mark.parametrize("score,expected", [
    (95, "Excellent"), (80, "Excellent"), (79, "Good"), (40, "Fair"), (20, "Poor"),
    (19, "Very Poor"),
])
def test_transit_quality_uses_lower_bounds(score, expected):
    assert get_transit_quality_rating(score).rating == expected


@pytest.mark.parametrize("index,expected", [
    (20, "Minimal"), (40, "Light"), (60, "Moderate"), (80, "Heavy"), (81, "Severe"),
])
def test_traffic_congestion_rating_bands(index, expected):
    assert get_traffic_congestion_rating(index).rating == expected


@pytest.mark.parametrize("percent,expected", [
    (0, "No Sales Tax"), (5, "Very Low"), (7, "Low"), (9, "Moderate"), (10, "High"),
    (10.25, "Very High"),
])
def test_sales_tax_rating_bands(percent, expected):
    assert get_sales_tax_rating(percent).rating == expected


@pytest.mark.parametrize("percent,expected", [
    (0.5, "Very Low"), (1.0, "Low"), (1.5, "Moderate"), (2.0, "High"), (2.2, "Very High"),
])
def test_property_tax_rating_bands(percent, expected):
    assert get_property_tax_rating(percent).rating == expected


def test_income_tax_rating():
    assert get_income_tax_rating(4.5, has_income_tax=False).rating == "No Income Tax"
    assert get_income_tax_rating(0).rating == "No Income Tax"
    assert get_income_tax_rating(3).rating == "Very Low"
    assert get_income_tax_rating(9.3).rating == "Very High"


@pytest.mark.parametrize("value,pollutant,expected", [
    (12, "pm25", "Good"),
    (12.1, "pm25", "Moderate"),
    (55.4, "pm25", "Unhealthy (Sensitive)"),
    (300, "pm25", "Hazardous"),
    (54, "pm10", "Good"),
    (424, "pm10", "Very Unhealthy"),
    (425, "pm10", "Hazardous"),
])
def test_pollutant_levels(value, pollutant, expected):
    assert get_pollutant_level(value, pollutant).rating == expected


def test_pollutant_level_rejects_unknown_pollutant():
    with pytest.raises(InvalidInputError):
        get_pollutant_level(10, "ozone")


@pytest.mark.parametrize("rate", [get_safety_rating, get_air_quality_rating, get_sales_tax_rating])
def test_nan_is_not_rated(rate):
    with pytest.raises(InvalidInputError):
        rate(float("nan"))


def test_infinite_value_falls_into_last_band():
    assert get_air_quality_rating(float("inf")).rating == "Hazardous"
