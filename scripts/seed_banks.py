#!/usr/bin/env python3
"""
Seed Bank Records for Local Development

Creates the ``bank`` table if it is missing and inserts a run of sample banks
with update_at values one hour apart, so /banks/next and /banks/previous have
something to walk.

Usage:
    python scripts/seed_banks.py
    python scripts/seed_banks.py --count 50 --start 2024-01-01T00:00:00Z
    python scripts/seed_banks.py --database-url sqlite+aiosqlite:///dev.db
"""

import argparse
import asyncio
from datetime import UTC, datetime, timedelta

from bankpage.api.pagination import parse_cursor
from bankpage.common.config import Settings
from bankpage.common.database import create_engine, create_session_factory
from bankpage.common.models import Bank, Base

CURRENCIES = ["USD", "EUR", "GBP", "JPY", "CHF", "SGD"]


def build_banks(count: int, start: datetime, step: timedelta) -> list[Bank]:
    banks = []
    for i in range(count):
        updated = start + step * i
        banks.append(
            Bank(
                code=f"BNK{i + 1:04d}",
                name=f"Sample Bank {i + 1}",
                currency=CURRENCIES[i % len(CURRENCIES)],
                url=f"https://bank{i + 1}.example.com",
                create_at=start,
                create_by="seed_banks",
                update_at=updated,
                update_by="seed_banks",
            )
        )
    return banks


async def seed(database_url: str, count: int, start: datetime, step: timedelta) -> None:
    engine = create_engine(Settings(database_url=database_url))
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with create_session_factory(engine)() as session:
            session.add_all(build_banks(count, start, step))
            await session.commit()
    finally:
        await engine.dispose()
    print(f"Inserted {count} banks starting at {start.isoformat()}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample bank records")
    parser.add_argument("--database-url", default=Settings().database_url)
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--start", default=None, help="RFC3339 update_at of the first bank (default: now, UTC)")
    parser.add_argument("--step-minutes", type=int, default=60)
    args = parser.parse_args()

    start = parse_cursor(args.start) if args.start else datetime.now(UTC).replace(microsecond=0)
    asyncio.run(seed(args.database_url, args.count, start, timedelta(minutes=args.step_minutes)))


if __name__ == "__main__":
    main()
