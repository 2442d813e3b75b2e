"""
Parcel store.

Sole mediator between the in-memory Parcel record and the `parcel` table.
The store owns nothing but the session it is given; opening and closing
that session belongs to the caller.
"""

from typing import List

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.app.core.exceptions import ParcelNotFoundError
from tracker.app.core.observability import timed_operation
from tracker.app.models.parcel import Parcel as ParcelRecord
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel


class ParcelStore:
    """
    CRUD access to parcels.

    Every operation issues one statement against one table. Writes are
    committed immediately. Storage errors propagate unchanged after the
    session is rolled back; the only error raised here is ParcelNotFoundError.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, parcel: Parcel) -> int:
        """
        Insert a new parcel and return its assigned number.

        Args:
            parcel: Parcel to store (its `number` is ignored)

        Returns:
            The newly assigned parcel number
        """
        async with timed_operation("add", self.db, client=parcel.client) as log_data:
            record = ParcelRecord(
                client=parcel.client,
                status=parcel.status,
                address=parcel.address,
                created_at=parcel.created_at,
            )
            self.db.add(record)
            await self.db.commit()
            log_data["number"] = record.number

        return record.number

    async def get(self, number: int) -> Parcel:
        """
        Fetch a parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number
        """
        async with timed_operation("get", self.db, number=number):
            result = await self.db.execute(
                select(ParcelRecord)
                .where(ParcelRecord.number == number)
                .execution_options(populate_existing=True)
            )
            record = result.scalar_one_or_none()

            if record is None:
                raise ParcelNotFoundError(number)

        return Parcel.model_validate(record)

    async def delete(self, number: int) -> None:
        """Remove a parcel. Deleting an unknown number is a no-op."""
        async with timed_operation("delete", self.db, number=number) as log_data:
            result = await self.db.execute(
                delete(ParcelRecord).where(ParcelRecord.number == number)
            )
            await self.db.commit()
            log_data["rows"] = result.rowcount

    async def set_address(self, number: int, address: str) -> None:
        """
        Replace the delivery address of a parcel.

        Raises:
            ParcelNotFoundError: If no parcel has this number
        """
        await self._update(number, "set_address", address=address)

    async def set_status(self, number: int, status: ParcelStatus) -> None:
        """
        Overwrite the status of a parcel.

        No transition check happens here; see ParcelService for the
        registered → sent → delivered policy.

        Raises:
            ParcelNotFoundError: If no parcel has this number
        """
        await self._update(number, "set_status", status=ParcelStatus(status))

    async def get_by_client(self, client: int) -> List[Parcel]:
        """Return all parcels of a client, oldest first (empty list if none)."""
        async with timed_operation("get_by_client", self.db, client=client) as log_data:
            result = await self.db.execute(
                select(ParcelRecord)
                .where(ParcelRecord.client == client)
                .order_by(ParcelRecord.number)
                .execution_options(populate_existing=True)
            )
            records = result.scalars().all()
            log_data["rows"] = len(records)

        return [Parcel.model_validate(record) for record in records]

    async def _update(self, number: int, operation: str, **values) -> None:
        async with timed_operation(operation, self.db, number=number):
            result = await self.db.execute(
                update(ParcelRecord)
                .where(ParcelRecord.number == number)
                .values(**values)
            )
            await self.db.commit()

            if result.rowcount == 0:
                raise ParcelNotFoundError(number)
