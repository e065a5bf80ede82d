"""Seed the database with a demo floor.

Usage:
    python -m nightbase.tools.seed_db
    python -m nightbase.tools.seed_db --drop  # drop existing data first
    python -m nightbase.tools.seed_db --verify-only
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from nightbase.adapters.persistence.database import Base, async_session_factory, engine
from nightbase.adapters.persistence.models import (
    CastAssignmentModel,
    ProfileModel,
    TableModel,
    TableSessionModel,
)
from nightbase.adapters.persistence.repositories import SqlTableSessionRepository
from nightbase.application.use_cases.floor_board import FloorBoardUseCase
from nightbase.config import settings
from nightbase.domain.value_objects.enums import CastStatus, ProfileRole, TableSessionStatus

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

DEMO_TABLES = ["A1", "A2", "VIP"]
DEMO_CASTS = ["あかり", "ゆい", "みく", "さくら"]
DEMO_GUESTS = ["田中様", "佐藤様", "鈴木様"]


async def _drop_data(session: AsyncSession) -> None:
    """Delete all data in correct order (respecting FK constraints)."""
    for model in [CastAssignmentModel, TableSessionModel, TableModel, ProfileModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


async def seed(drop: bool = False) -> dict[str, int]:
    """Create tables if needed and insert the demo floor. Returns record counts."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        existing = await session.execute(select(TableModel).where(TableModel.name.in_(DEMO_TABLES)))
        if existing.scalars().first():
            logger.info("Demo floor already present, skipping (use --drop to reseed)")
            return {"tables": 0, "profiles": 0, "sessions": 0, "assignments": 0}

        tables = [TableModel(name=name) for name in DEMO_TABLES]
        casts = [ProfileModel(display_name=n, role=ProfileRole.CAST.value) for n in DEMO_CASTS]
        guests = [ProfileModel(display_name=n, role=ProfileRole.GUEST.value) for n in DEMO_GUESTS]
        session.add_all([*tables, *casts, *guests])
        await session.flush()

        now = datetime.now(timezone.utc)
        active = TableSessionModel(
            table_id=tables[0].id,
            guest_count=2,
            status=TableSessionStatus.ACTIVE.value,
            start_time=now - timedelta(minutes=45),
        )
        vip = TableSessionModel(
            table_id=tables[2].id,
            guest_count=1,
            status=TableSessionStatus.ACTIVE.value,
            start_time=now - timedelta(minutes=10),
        )
        done = TableSessionModel(
            table_id=tables[1].id,
            guest_count=1,
            status=TableSessionStatus.COMPLETED.value,
            start_time=now - timedelta(hours=3),
            end_time=now - timedelta(hours=1),
        )
        session.add_all([active, vip, done])
        await session.flush()

        def entry(sess, cast, guest, status) -> CastAssignmentModel:
            return CastAssignmentModel(
                table_session_id=sess.id,
                cast_id=cast.id,
                guest_id=guest.id,
                status=status,
                start_time=now,
            )

        assignments = [
            # Table A1: two guests, one served by two casts, one waiting
            entry(active, guests[0], guests[0], CastStatus.SERVING.value),
            entry(active, casts[0], guests[0], CastStatus.SERVING.value),
            entry(active, casts[1], guests[0], CastStatus.SERVING.value),
            entry(active, guests[1], guests[1], CastStatus.SERVING.value),
            entry(active, casts[2], guests[1], CastStatus.WAITING.value),
            # VIP: guest with an ended cast only
            entry(vip, guests[2], guests[2], CastStatus.SERVING.value),
            entry(vip, casts[3], guests[2], CastStatus.ENDED.value),
            # Completed session
            entry(done, guests[2], guests[2], CastStatus.ENDED.value),
            entry(done, casts[0], guests[2], CastStatus.ENDED.value),
        ]
        session.add_all(assignments)
        await session.commit()

    counts = {
        "tables": len(tables),
        "profiles": len(casts) + len(guests),
        "sessions": 3,
        "assignments": len(assignments),
    }
    logger.info("Seeded demo floor: %s", counts)
    return counts


async def _verify_data() -> None:
    """Print the floor board as the API would build it."""
    async with async_session_factory() as session:
        board = FloorBoardUseCase(
            SqlTableSessionRepository(session),
            visible_groups=settings.floor_board_visible_groups,
            tz=settings.display_timezone,
        )
        cards = await board.execute()

    print(f"\n{'='*50}")
    print("FLOOR BOARD")
    print(f"{'='*50}")
    for card in cards:
        print(f"{card.table_name}  {card.start_time_label}〜  {card.guest_count}名")
        for group in card.guest_groups:
            guest = group.guest.display_name if group.guest else "?"
            staff = ", ".join(p.display_name or "?" for p in group.serving_staff if p)
            print(f"  {guest} ← {staff or 'オンリー'}")
        if card.hidden_group_count:
            print(f"  他 {card.hidden_group_count} 組")
    print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Seed Nightbase database with a demo floor")
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing data before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only print the floor board, don't seed",
    )
    args = parser.parse_args()

    async def run_all():
        if not args.verify_only:
            await seed(drop=args.drop)
        await _verify_data()
        await engine.dispose()

    asyncio.run(run_all())


if __name__ == "__main__":
    main()
