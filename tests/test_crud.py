from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from lifecost import crud
from lifecost.errors import Err, ErrorKind, Ok


def _session(rows=None, error=None):
    """AsyncSession stand-in whose execute() yields `rows` or raises `error`."""
    db = AsyncMock()
    if error is not None:
        db.execute.side_effect = error
    else:
        result = MagicMock()
        result.scalars.return_value.all.return_value = rows
        result.scalars.return_value.first.return_value = rows[0] if rows else None
        db.execute.return_value = result
    return db


def _city_row(slug="austin-tx"):
    return SimpleNamespace(
        slug=slug, name="Austin", state="TX", latitude=30.2672, longitude=-97.7431,
        median_income=85000, monthly_cost=3200, avg_rent=1650, commute_time=27,
        crime_rate=38.5, amenities_score=84, affordability_score=62, jobs_score=88,
        commute_score=70, safety_score=66, lifestyle_score=86, overall_score=74.4,
    )


def _crime_row(year, overall):
    return SimpleNamespace(year=year, violent_crime_rate=400.0, property_crime_rate=2500.0,
                           overall_crime_index=overall)


@pytest.mark.asyncio
async def test_get_cities_maps_rows():
    result = await crud.get_cities(_session([_city_row(), _city_row("dallas-tx")]))
    assert isinstance(result, Ok)
    assert [city.slug for city in result.value] == ["austin-tx", "dallas-tx"]
    assert result.value[0].lat == 30.2672
    assert result.value[0].scores.overall == 74.4


@pytest.mark.asyncio
async def test_get_cities_empty_table_is_ok():
    result = await crud.get_cities(_session([]))
    assert result == Ok([])


@pytest.mark.asyncio
async def test_get_cities_query_failure():
    result = await crud.get_cities(_session(error=SQLAlchemyError("connection lost")))
    assert isinstance(result, Err)
    assert result.kind == ErrorKind.FETCH_FAILED


@pytest.mark.asyncio
async def test_get_city_by_slug():
    found = await crud.get_city_by_slug(_session([_city_row()]), "austin-tx")
    missing = await crud.get_city_by_slug(_session([]), "atlantis")
    assert found.ok and found.value.slug == "austin-tx"
    assert not missing.ok
    assert missing.kind == ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_get_crime_trends():
    rows = [_crime_row(2024, 48), _crime_row(2023, 50)]
    result = await crud.get_crime_trends(_session(rows), "austin-tx", years_back=2)
    assert result.ok
    assert [trend.year for trend in result.value] == [2024, 2023]
    assert result.value[0].overall_crime_index == 48


@pytest.mark.asyncio
async def test_trends_without_data_are_not_found():
    result = await crud.get_air_quality_trends(_session([]), "austin-tx")
    assert result.kind == ErrorKind.NOT_FOUND
    assert "air quality" in result.message


@pytest.mark.asyncio
async def test_trends_query_failure_is_distinct_from_no_data():
    error = OperationalError("SELECT 1", {}, Exception("server closed the connection"))
    result = await crud.get_transportation_trends(_session(error=error), "austin-tx")
    assert result.kind == ErrorKind.FETCH_FAILED


@pytest.mark.asyncio
async def test_unreachable_server_is_fetch_failure():
    result = await crud.get_crime_trends(_session(error=ConnectionRefusedError()), "austin-tx")
    assert result.kind == ErrorKind.FETCH_FAILED
