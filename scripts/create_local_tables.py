#!/usr/bin/env python3
"""Create the plann.er tables for local development.

Creates trips, participants, activities and links on the configured database
(DATABASE_URL or DB_* env vars) and optionally seeds one sample trip.

Usage:
    python scripts/create_local_tables.py [--seed]
"""

import argparse
import sys
from datetime import UTC, datetime
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.db import ActivityRecord, Base, TripRecord, get_engine, get_session_factory


def seed_sample_trip() -> str:
    """Insert a sample trip with one activity and return its id."""
    session = get_session_factory()()
    try:
        trip = TripRecord(
            destination="Florianópolis",
            starts_at=datetime(2024, 8, 4, tzinfo=UTC),
            ends_at=datetime(2024, 8, 10, tzinfo=UTC),
        )
        trip.activities.append(ActivityRecord(title="Trilha da Lagoinha do Leste", occurs_at=datetime(2024, 8, 5, 9, tzinfo=UTC)))
        session.add(trip)
        session.commit()
        return str(trip.id)
    finally:
        session.close()


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="insert a sample trip")
    args = parser.parse_args()

    engine = get_engine()
    print(f"Creating tables at {engine.url.render_as_string(hide_password=True)}...")

    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        print(f"✗ Could not create tables: {e}")
        raise

    for table in Base.metadata.sorted_tables:
        print(f"✓ {table.name}")

    if args.seed:
        print()
        print(f"✓ Seeded trip {seed_sample_trip()}")

    print()
    print("✅ All tables ready")


if __name__ == "__main__":
    main()
