"""Reset database to empty state.

Drops and recreates:
- participants
- lottery_draws
- second_kill_events

Usage:
    cd backend && python -m scripts.reset_db
"""

import asyncio

from promo_store.core.config import settings
from promo_store.core.database import Base, create_engine, drop_models, init_models


async def main():
    print("=" * 60)
    print("Resetting database to empty state...")
    print("=" * 60)

    engine = create_engine(settings)
    try:
        await drop_models(engine)
        print("  Dropped tables: " + ", ".join(sorted(Base.metadata.tables)))

        await init_models(engine)
        print("  Recreated tables")
    finally:
        await engine.dispose()

    print("\n" + "=" * 60)
    print("Reset complete!")
    print("=" * 60)
    print("\nTo re-seed the database, run:")
    print("  cd backend && python -m scripts.seed_data")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
