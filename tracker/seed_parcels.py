"""
Database seeding script for demo parcels.

Registers a few parcels for one client and walks them through the store:
status change, address change and deletion.
Run with ``python -m tracker.seed_parcels``.
"""

import asyncio
import random
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tracker.app.core.observability import configure_logging
from tracker.app.db.session import AsyncSessionLocal, init_db
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel
from tracker.app.services.parcel_store import ParcelStore


DEMO_ADDRESSES = [
    "Psk, Lenina 1",
    "Msk, Arbat 12",
    "Spb, Nevsky 30",
]


def print_parcels(title: str, parcels: List[Parcel]) -> None:
    print(f"\n{title}")
    for parcel in parcels:
        print(
            f"  #{parcel.number}: client={parcel.client} status={parcel.status.value} "
            f"address='{parcel.address}' created_at={parcel.created_at}"
        )


async def seed_parcels(
    session_factory=AsyncSessionLocal,
    bind=None,
    client: Optional[int] = None
) -> List[int]:
    """
    Seed demo parcels for a single client.

    Steps:
    - register one parcel per demo address
    - mark the first one as sent
    - change the address of the second one
    - delete the third one

    Args:
        session_factory: Session factory to open the store session from
        bind: Engine to create the table on (defaults to the app engine)
        client: Client id to seed; random when omitted

    Returns:
        Numbers of the parcels left in the store for the client
    """
    if client is None:
        client = random.Random().randrange(10_000_000)

    await init_db(bind)

    async with session_factory() as db:
        store = ParcelStore(db)
        print(f"🌱 Seeding parcels for client {client}...")

        numbers = []
        for address in DEMO_ADDRESSES:
            number = await store.add(Parcel(client=client, address=address))
            numbers.append(number)
            print(f"✅ Registered parcel #{number} to '{address}'")

        print_parcels("Registered parcels:", await store.get_by_client(client))

        await store.set_status(numbers[0], ParcelStatus.SENT)
        print(f"🚚 Parcel #{numbers[0]} sent")

        await store.set_address(numbers[1], "Psk, Pushkina 5")
        print(f"🏠 Parcel #{numbers[1]} address changed")

        await store.delete(numbers[2])
        print(f"🗑️  Parcel #{numbers[2]} deleted")

        remaining = await store.get_by_client(client)
        print_parcels("Parcels after updates:", remaining)

        print("\n🎉 Parcel seeding completed successfully!")
        return [parcel.number for parcel in remaining]


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed_parcels())
