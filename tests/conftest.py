"""
Shared fixtures for the LifeCost+ test suite.

Provides:
- a factory for catalog City records with sensible defaults
- a small in-memory catalog
- a FastAPI test client with that catalog injected in place of the dataset
"""
import pytest
from fastapi.testclient import TestClient

from lifecost.cache import cache
from lifecost.catalog import CityCatalog, get_catalog
from lifecost.schemas import City, Scores


def build_city(
    slug: str = "test-city",
    name: str = None,
    state: str = "TX",
    lat: float = 30.0,
    lng: float = -97.0,
    median_income: float = 60000,
    monthly_cost: float = 2800,
    avg_rent: float = 1400,
    commute_time: float = 22,
    affordability: float = 70,
    jobs: float = 70,
    commute: float = 70,
    safety: float = 70,
    lifestyle: float = 70,
    overall: float = None,
) -> City:
    sub_scores = [affordability, jobs, commute, safety, lifestyle]
    return City(
        slug=slug,
        name=name or slug.replace("-", " ").title(),
        state=state,
        lat=lat,
        lng=lng,
        median_income=median_income,
        monthly_cost=monthly_cost,
        avg_rent=avg_rent,
        commute_time=commute_time,
        scores=Scores(
            affordability=affordability,
            jobs=jobs,
            commute=commute,
            safety=safety,
            lifestyle=lifestyle,
            overall=overall if overall is not None else sum(sub_scores) / 5,
        ),
    )


@pytest.fixture
def make_city():
    return build_city


@pytest.fixture
def cities():
    """Four cities; only cheap-town and mid-town fit a $60k income at $1,500 rent."""
    return [
        build_city("cheap-town", avg_rent=1000, commute_time=35, affordability=90, safety=50,
                   lifestyle=60, lat=32.7767, lng=-96.7970),
        build_city("mid-town", avg_rent=1400, commute_time=22, affordability=70, safety=80,
                   lifestyle=75, lat=32.7555, lng=-97.3308),
        build_city("pricey-town", avg_rent=2400, median_income=120000, monthly_cost=4800,
                   affordability=35, safety=75, lifestyle=92, lat=37.7749, lng=-122.4194),
        build_city("edge-town", avg_rent=1550, commute_time=18, affordability=65, safety=90,
                   lifestyle=70, lat=30.2672, lng=-97.7431),
    ]


@pytest.fixture
def catalog(cities):
    return CityCatalog(cities)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client(catalog):
    from lifecost.main import app

    app.dependency_overrides[get_catalog] = lambda: catalog
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
