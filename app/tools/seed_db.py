"""Seed database from CSV files.

Usage:
    python -m app.tools.seed_db
    python -m app.tools.seed_db --roster data/technicians.csv --postal-regions data/postal_regions.csv
    python -m app.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections import Counter
from pathlib import Path

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.csv_loader.loader import load_postal_regions, load_technicians
from app.adapters.persistence.database import async_session_factory
from app.adapters.persistence.models import PostalRegionModel, TechnicianModel
from app.adapters.persistence.repositories import (
    SqlPostalRegionRepository,
    SqlTechnicianRepository,
)
from app.config import settings
from app.domain.entities.technician import Technician
from app.domain.policies.location_resolution import GeolocationResolver
from app.domain.policies.postal_format import get_postal_format
from app.domain.reference.tables import get_reference_tables

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def precision_summary(
    roster: list[Technician],
    jurisdiction: str,
    postal_regions: dict[str, str] | None = None,
) -> Counter:
    """How many roster entries resolve at each precision tier."""
    postal_format = get_postal_format(jurisdiction)
    resolver = GeolocationResolver.for_roster(
        postal_format,
        get_reference_tables(postal_format.jurisdiction),
        roster,
        postal_regions=postal_regions,
    )
    return Counter(
        resolver.resolve(t.postal, t.city, t.region).precision.value for t in roster
    )


async def _drop_data(session: AsyncSession) -> None:
    for model in [TechnicianModel, PostalRegionModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


async def seed(roster_csv: Path, postal_region_csv: Path | None = None, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of seeded records."""
    counts = {"technicians": 0, "postal_regions": 0}

    if not roster_csv.exists():
        raise FileNotFoundError(f"Roster CSV not found: {roster_csv}")

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        # 1. Technicians, keyed by source tech id
        for tech in load_technicians(roster_csv):
            existing = await session.execute(
                select(TechnicianModel).where(TechnicianModel.tech_id == tech.id)
            )
            if existing.scalar_one_or_none():
                logger.debug("Technician '%s' already exists, skipping", tech.id)
                continue

            session.add(
                TechnicianModel(
                    tech_id=tech.id,
                    name=tech.name,
                    city=tech.city or None,
                    region=tech.region or None,
                    postal=tech.postal or None,
                )
            )
            counts["technicians"] += 1

        await session.commit()

        # 2. Optional postal → region mapping
        if postal_region_csv and postal_region_csv.exists():
            for postal, region in load_postal_regions(postal_region_csv).items():
                # merge() upserts on the postal primary key
                await session.merge(PostalRegionModel(postal=postal, region=region))
                counts["postal_regions"] += 1
            await session.commit()
        else:
            logger.info("No postal mapping CSV — skipping postal_regions import")

    logger.info(
        "Seed complete: %d technicians, %d postal regions",
        counts["technicians"], counts["postal_regions"],
    )
    return counts


async def _verify_data(jurisdiction: str) -> None:
    """Print sanity checks after seeding."""
    async with async_session_factory() as session:
        roster = await SqlTechnicianRepository(session).get_all()
        mapping = await SqlPostalRegionRepository(session).get_mapping()

    print(f"\n{'='*50}")
    print("SEED VERIFICATION")
    print(f"{'='*50}")
    print(f"Technicians:    {len(roster)}")
    print(f"Postal regions: {len(mapping or {})}")

    with_postal = sum(1 for t in roster if t.postal)
    print(f"Technicians with postal code: {with_postal}/{len(roster)}")

    regions = Counter(t.region or "?" for t in roster)
    print(f"Region distribution: {dict(regions)}")

    tiers = precision_summary(roster, jurisdiction, mapping)
    print(f"Resolution tiers ({jurisdiction}): {dict(tiers)}")
    if tiers.get("unresolved"):
        print(f"WARNING: {tiers['unresolved']} technician(s) will never be ranked")
    print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Seed dispatch database from CSV files")
    parser.add_argument(
        "--roster", type=str, default=settings.roster_csv_path,
        help=f"Technician roster CSV (default: {settings.roster_csv_path})",
    )
    parser.add_argument(
        "--postal-regions", type=str, default=settings.postal_region_csv_path or None,
        help="Optional postal → region mapping CSV",
    )
    parser.add_argument(
        "--jurisdiction", type=str, default=settings.dispatch_jurisdiction,
        help="Jurisdiction used for the verification report (CA or US)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing data before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    roster_csv = Path(args.roster)
    if not args.verify_only and not roster_csv.exists():
        logger.error("Roster CSV not found: %s", roster_csv)
        sys.exit(1)

    if args.verify_only:
        asyncio.run(_verify_data(args.jurisdiction))
    else:
        postal_region_csv = Path(args.postal_regions) if args.postal_regions else None

        async def run_all():
            await seed(roster_csv, postal_region_csv, drop=args.drop)
            await _verify_data(args.jurisdiction)
        asyncio.run(run_all())


if __name__ == "__main__":
    main()
