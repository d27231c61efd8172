"""
Parcel store service.

Translates Parcel values to and from rows of the ``parcel`` table.
Every operation is one statement committed before returning; the store
keeps no state of its own beyond the session it was given.
"""

from typing import List, Union

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.app.core.exceptions import ParcelNotFoundError, InvalidParcelStatusError
from tracker.app.core.observability import logger
from tracker.app.models.parcel import ParcelRecord
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel


class ParcelStore:
    """
    Persistence facade over the parcel table.

    The session is owned by the caller: the store never opens or closes it.
    Storage errors are rolled back and re-raised unchanged.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, parcel: Parcel) -> int:
        """
        Insert a new parcel and return the number assigned to it.

        Any ``number`` already set on the value is ignored.

        Raises:
            InvalidParcelStatusError: If the parcel carries an unknown status
        """
        try:
            status = ParcelStatus(parcel.status)
        except ValueError:
            raise InvalidParcelStatusError(parcel.status) from None
        record = ParcelRecord(
            client=parcel.client,
            status=status.value,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        try:
            self.db.add(record)
            await self.db.flush()
            number = record.number
            await self.db.commit()
        except SQLAlchemyError:
            await self._fail("add", client=parcel.client)
            raise

        logger.debug("Parcel added", extra={"operation": "add", "number": number, "client": parcel.client})
        return number

    async def get(self, number: int) -> Parcel:
        """
        Fetch one parcel by number.

        Raises:
            ParcelNotFoundError: If no row has this number
        """
        query = (
            select(ParcelRecord)
            .where(ParcelRecord.number == number)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(query)
            record = result.scalar_one_or_none()
        except SQLAlchemyError:
            await self._fail("get", number=number)
            raise

        if record is None:
            raise ParcelNotFoundError(number)
        return Parcel.model_validate(record)

    async def get_by_client(self, client: int) -> List[Parcel]:
        """Fetch every parcel of a client, ordered by number. Empty list when none match."""
        query = (
            select(ParcelRecord)
            .where(ParcelRecord.client == client)
            .order_by(ParcelRecord.number)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.db.execute(query)
            records = result.scalars().all()
        except SQLAlchemyError:
            await self._fail("get_by_client", client=client)
            raise

        return [Parcel.model_validate(record) for record in records]

    async def set_address(self, number: int, address: str) -> None:
        """
        Overwrite the address of one parcel.

        Raises:
            ParcelNotFoundError: If no row has this number
        """
        await self._update_one("set_address", number, address=address)

    async def set_status(self, number: int, status: Union[ParcelStatus, str]) -> None:
        """
        Overwrite the status of one parcel.

        Raises:
            InvalidParcelStatusError: If status is not a ParcelStatus value
            ParcelNotFoundError: If no row has this number
        """
        try:
            status = ParcelStatus(status)
        except ValueError:
            raise InvalidParcelStatusError(status) from None
        await self._update_one("set_status", number, status=status.value)

    async def delete(self, number: int) -> None:
        """
        Remove one parcel.

        Deleting a number that does not exist is not an error;
        a later get() reports it as not found.
        """
        try:
            result = await self.db.execute(
                delete(ParcelRecord).where(ParcelRecord.number == number)
            )
            await self.db.commit()
        except SQLAlchemyError:
            await self._fail("delete", number=number)
            raise

        logger.debug("Parcel deleted", extra={"operation": "delete", "number": number, "rows": result.rowcount})

    async def _update_one(self, operation: str, number: int, **values) -> None:
        try:
            result = await self.db.execute(
                update(ParcelRecord).where(ParcelRecord.number == number).values(**values)
            )
            await self.db.commit()
        except SQLAlchemyError:
            await self._fail(operation, number=number)
            raise

        if result.rowcount == 0:
            raise ParcelNotFoundError(number)
        logger.debug("Parcel updated", extra={"operation": operation, "number": number, "fields": sorted(values)})

    async def _fail(self, operation: str, **context) -> None:
        await self.db.rollback()
        logger.error("Parcel store operation failed", exc_info=True, extra={"operation": operation, **context})
