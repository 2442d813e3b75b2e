"""
Parcel workflow service.

Applies the domain rules the store leaves to its callers:
status only moves one step forward (registered → sent → delivered), and
address changes or deletion are allowed only while a parcel is registered.
"""

from typing import List

from tracker.app.core.exceptions import InvalidStatusTransitionError, ParcelNotModifiableError
from tracker.app.core.observability import logger
from tracker.app.models.parcel_enums import ParcelStatus, can_transition
from tracker.app.schemas.parcel import Parcel, utc_timestamp
from tracker.app.store.parcel_store import ParcelStore


class ParcelService:
    """Workflow rules for registering, advancing and changing parcels."""

    def __init__(self, store: ParcelStore):
        self.store = store

    async def register(self, client: int, address: str) -> Parcel:
        """
        Register a new parcel for a client.

        Args:
            client: Owning client identifier
            address: Delivery address

        Returns:
            The stored parcel, with its assigned number
        """
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_timestamp(),
        )
        parcel.number = await self.store.add(parcel)

        logger.info(
            "Parcel Registered",
            extra={
                "number": parcel.number,
                "client": client,
                "address": address,
                "created_at": parcel.created_at,
            }
        )
        return parcel

    async def client_parcels(self, client: int) -> List[Parcel]:
        """List every parcel of a client."""
        parcels = await self.store.get_by_client(client)

        for parcel in parcels:
            logger.info(
                "Client Parcel",
                extra={
                    "number": parcel.number,
                    "client": client,
                    "address": parcel.address,
                    "status": parcel.status.value,
                    "created_at": parcel.created_at,
                }
            )
        return parcels

    async def next_status(self, number: int) -> ParcelStatus:
        """
        Advance a parcel to the following status.

        Raises:
            InvalidStatusTransitionError: If the parcel is already delivered
        """
        parcel = await self.store.get(number)

        new_status = parcel.status.next()
        if new_status is None:
            raise InvalidStatusTransitionError(number, parcel.status.value)

        await self.store.set_status(number, new_status)

        logger.info(
            "Parcel Status Changed",
            extra={"number": number, "old_status": parcel.status.value, "status": new_status.value}
        )
        return new_status

    async def change_status(self, number: int, status: ParcelStatus) -> None:
        """
        Move a parcel to an explicit status, if the move is one step forward.

        Raises:
            InvalidStatusTransitionError: For any other move
        """
        status = ParcelStatus(status)
        parcel = await self.store.get(number)

        if not can_transition(parcel.status, status):
            raise InvalidStatusTransitionError(number, parcel.status.value, status.value)

        await self.store.set_status(number, status)

        logger.info(
            "Parcel Status Changed",
            extra={"number": number, "old_status": parcel.status.value, "status": status.value}
        )

    async def change_address(self, number: int, address: str) -> None:
        """
        Change the delivery address of a parcel that has not been sent yet.

        Raises:
            ParcelNotModifiableError: If the parcel is no longer registered
        """
        parcel = await self.store.get(number)

        if parcel.status != ParcelStatus.REGISTERED:
            raise ParcelNotModifiableError(number, parcel.status.value, "change address of")

        await self.store.set_address(number, address)

        logger.info("Parcel Address Changed", extra={"number": number, "address": address})

    async def delete(self, number: int) -> None:
        """
        Delete a parcel that has not been sent yet.

        Raises:
            ParcelNotModifiableError: If the parcel is no longer registered
        """
        parcel = await self.store.get(number)

        if parcel.status != ParcelStatus.REGISTERED:
            raise ParcelNotModifiableError(number, parcel.status.value, "delete")

        await self.store.delete(number)

        logger.info("Parcel Deleted", extra={"number": number, "client": parcel.client})
