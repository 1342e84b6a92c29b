# scripts/seed_cities.py
"""
Seeds the `cities` table from a catalog JSON file (the bundled dataset by
default). Existing rows are matched on slug and updated in place.

Usage: python scripts/seed_cities.py [path/to/cities.json]
"""
import asyncio
import sys
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from lifecost.catalog import CATALOG_PATH, load_static_catalog, normalize_name, validate_catalog
from lifecost.database import Base, get_engine, get_sessionmaker
from lifecost.models import City
from lifecost.schemas import City as CatalogCity

BATCH_SIZE = 500


def apply_city_fields(row: City, city: CatalogCity) -> None:
    """Copies a catalog City onto a `cities` row."""
    row.slug = city.slug
    row.name = city.name
    row.name_normalized = normalize_name(city.name)
    row.state = city.state
    row.latitude = city.lat
    row.longitude = city.lng
    row.median_income = city.median_income
    row.monthly_cost = city.monthly_cost
    row.avg_rent = city.avg_rent
    row.commute_time = city.commute_time
    row.crime_rate = city.crime_rate
    row.amenities_score = city.amenities_score
    row.affordability_score = city.scores.affordability
    row.jobs_score = city.scores.jobs
    row.commute_score = city.scores.commute
    row.safety_score = city.scores.safety
    row.lifestyle_score = city.scores.lifestyle
    row.overall_score = city.scores.overall


async def upsert_cities(db: AsyncSession, cities: list) -> tuple:
    """Stages every city as an insert or update. Returns (inserted, updated)."""
    inserted = updated = 0
    for start in range(0, len(cities), BATCH_SIZE):
        batch = cities[start:start + BATCH_SIZE]
        print(f"Batch {start // BATCH_SIZE + 1}: {len(batch)} cities")
        result = await db.execute(select(City).where(City.slug.in_([c.slug for c in batch])))
        by_slug = {row.slug: row for row in result.scalars().all()}

        for city in batch:
            row = by_slug.get(city.slug)
            if row is None:
                row = City()
                inserted += 1
            else:
                updated += 1
            apply_city_fields(row, city)
            db.add(row)
    return inserted, updated


async def main(path: Path):
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables checked/created.")

    print(f"Reading catalog from {path}...")
    cities = load_static_catalog(path).cities()
    for issue in validate_catalog(cities):
        print(f"  WARNING: {issue}")
    if not cities:
        print("Nothing to seed.")
        return

    async with get_sessionmaker()() as session:
        inserted, updated = await upsert_cities(session, cities)
        try:
            await session.commit()
        except Exception as e:
            await session.rollback()
            print(f"Commit failed: {e}")
            raise
    print(f"Done: {inserted} inserted, {updated} updated.")

if __name__ == "__main__":
    source = Path(sys.argv[1]) if len(sys.argv) > 1 else CATALOG_PATH
    asyncio.run(main(source))
