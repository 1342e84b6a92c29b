# scripts/attributes/update_air_quality.py
"""
Refreshes the current year's row in `city_air_quality_stats` for every city
from a year of OpenWeatherMap hourly pollution history.

Processed slugs are appended to a progress file so an interrupted run
resumes where it stopped. Delete the file to start over.
"""
import asyncio
import os
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import httpx
import numpy as np
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from lifecost.database import get_sessionmaker
from lifecost.models import AirQualityStat, City

HISTORY_URL = "http://api.openweathermap.org/data/2.5/air_pollution/history"
PROGRESS_FILE = Path(__file__).parent / "air_quality_progress.log"
REQUEST_INTERVAL = 1.1  # seconds; free tier allows 60 calls a minute

# lifecost.database has already loaded .env
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")

# EPA PM2.5 breakpoints: (concentration low, high, AQI low, high)
PM25_AQI_BREAKPOINTS = [
    (0.0, 12.0, 0, 50),
    (12.1, 35.4, 51, 100),
    (35.5, 55.4, 101, 150),
    (55.5, 150.4, 151, 200),
    (150.5, 250.4, 201, 300),
    (250.5, 500.4, 301, 500),
]


def pm25_to_aqi(concentration: float) -> float:
    """US AQI for a PM2.5 concentration in µg/m³, linear within each breakpoint."""
    c = round(concentration, 1)
    for c_low, c_high, i_low, i_high in PM25_AQI_BREAKPOINTS:
        if c <= c_high:
            c = max(c, c_low)
            return (i_high - i_low) / (c_high - c_low) * (c - c_low) + i_low
    return 500.0


def summarize_history(records: list) -> Optional[dict]:
    """Annual averages and good/unhealthy day counts from hourly records."""
    if not records:
        return None
    pm25 = np.array([item['components']['pm2_5'] for item in records], dtype=float)
    pm10 = np.array([item['components']['pm10'] for item in records], dtype=float)

    by_day = defaultdict(list)
    for item in records:
        day = datetime.fromtimestamp(item['dt'], tz=timezone.utc).date()
        by_day[day].append(item['components']['pm2_5'])
    daily_aqi = np.array([pm25_to_aqi(float(np.mean(v))) for v in by_day.values()])

    avg_pm25 = float(pm25.mean())
    return {
        "avg_annual_pm25": avg_pm25,
        "avg_annual_pm10": float(pm10.mean()),
        "avg_annual_aqi": pm25_to_aqi(avg_pm25),
        "good_air_days": int((daily_aqi <= 50).sum()),
        "unhealthy_air_days": int((daily_aqi > 100).sum()),
    }


def read_progress() -> set:
    if not PROGRESS_FILE.exists():
        return set()
    return set(PROGRESS_FILE.read_text().split())


def mark_done(slug: str) -> None:
    with open(PROGRESS_FILE, 'a') as f:
        f.write(f"{slug}\n")


async def save_summary(session: AsyncSession, city: City, year: int, summary: dict) -> None:
    result = await session.execute(
        select(AirQualityStat).where(AirQualityStat.city_id == city.id, AirQualityStat.year == year)
    )
    stat = result.scalars().first() or AirQualityStat(city_id=city.id, year=year)
    for field, value in summary.items():
        setattr(stat, field, value)
    session.add(stat)
    await session.commit()


async def refresh_air_quality(session: AsyncSession):
    done = read_progress()
    result = await session.execute(select(City).where(City.slug.notin_(done)).order_by(City.id))
    pending = result.scalars().all()
    print(f"{len(done)} cities already done, {len(pending)} to fetch.")

    end = datetime.now(timezone.utc)
    window = {"start": int((end - timedelta(days=365)).timestamp()), "end": int(end.timestamp())}

    async with httpx.AsyncClient(timeout=30.0) as client:
        for n, city in enumerate(pending, start=1):
            print(f"[{n}/{len(pending)}] {city.name} ({city.slug})")
            params = {"lat": city.latitude, "lon": city.longitude, "appid": OPENWEATHER_API_KEY, **window}
            try:
                response = await client.get(HISTORY_URL, params=params)
                response.raise_for_status()
                summary = summarize_history(response.json().get("list", []))
                if summary is None:
                    print("  no history returned")
                else:
                    await save_summary(session, city, end.year, summary)
                    print(f"  PM2.5 {summary['avg_annual_pm25']:.2f}, AQI {summary['avg_annual_aqi']:.0f}")
                mark_done(city.slug)
            except (httpx.HTTPError, KeyError, ValueError) as e:
                await session.rollback()
                print(f"  FAILED: {e}")

            await asyncio.sleep(REQUEST_INTERVAL)


async def main():
    if not OPENWEATHER_API_KEY:
        raise ValueError("OPENWEATHER_API_KEY not set in your .env file.")
    async with get_sessionmaker()() as session:
        await refresh_air_quality(session)

if __name__ == "__main__":
    asyncio.run(main())
