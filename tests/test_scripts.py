import importlib.util
from pathlib import Path

import pytest

from lifecost.models import City as CityRow

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def _load_script(relative_path):
    path = SCRIPTS_DIR / relative_path
    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def air_quality():
    return _load_script("attributes/update_air_quality.py")


@pytest.fixture(scope="module")
def seed():
    return _load_script("seed_cities.py")


@pytest.mark.parametrize("concentration,expected", [
    (0.0, 0),
    (12.0, 50),
    (35.4, 100),
    (55.4, 150),
])
def test_pm25_to_aqi_breakpoints(air_quality, concentration, expected):
    assert air_quality.pm25_to_aqi(concentration) == pytest.approx(expected)


def test_pm25_beyond_scale_is_capped(air_quality):
    assert air_quality.pm25_to_aqi(900) == 500.0


def _hour(day, pm25, pm10=20.0):
    return {"dt": day * 86400 + 3600, "components": {"pm2_5": pm25, "pm10": pm10}}


def test_summarize_history(air_quality):
    records = [_hour(0, 4.0), _hour(0, 6.0), _hour(1, 40.0)]
    summary = air_quality.summarize_history(records)

    assert summary["avg_annual_pm25"] == pytest.approx(50 / 3)
    assert summary["avg_annual_pm10"] == pytest.approx(20)
    assert summary["good_air_days"] == 1
    assert summary["unhealthy_air_days"] == 1


def test_summarize_empty_history(air_quality):
    assert air_quality.summarize_history([]) is None


def test_apply_city_fields(seed, make_city):
    city = make_city("austin-tx", name="Austin", lat=30.2672, lng=-97.7431, safety=66)
    row = CityRow()
    seed.apply_city_fields(row, city)

    assert row.slug == "austin-tx"
    assert row.name_normalized == "austin"
    assert row.latitude == 30.2672
    assert row.longitude == -97.7431
    assert row.safety_score == 66
    assert row.overall_score == city.scores.overall
