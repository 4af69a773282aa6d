# parcel_tracker/service.py
import logging
from typing import List, Optional

from .models import Parcel, ParcelStatus
from .store import ParcelStore
from .utils import format_created_at, next_status

logger = logging.getLogger("parcel_tracker")


class ParcelService:
    """
    Parcel lifecycle on top of a ParcelStore.

    New parcels start as registered with the current UTC time; status then
    advances registered -> sent -> delivered. Address changes and deletion
    keep the store's rule: they only apply while the parcel is registered.
    """

    def __init__(self, store: ParcelStore):
        self.store = store

    def register(self, client: int, address: str) -> Parcel:
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED.value,
            address=address,
            created_at=format_created_at(),
        )
        parcel.number = self.store.add(parcel)
        logger.info("Parcel registered", extra={"number": parcel.number, "client": client})
        return parcel

    def get(self, number: int) -> Parcel:
        return self.store.get(number)

    def client_parcels(self, client: int) -> List[Parcel]:
        return self.store.get_by_client(client)

    def next_status(self, number: int) -> Optional[str]:
        """Advance the parcel one step; returns the new status, or None if it cannot move."""
        parcel = self.store.get(number)
        status = next_status(parcel.status)
        if status is None:
            logger.info("Parcel status unchanged", extra={"number": number, "status": parcel.status})
            return None
        if self.store.advance_status(number, parcel.status, status) == 0:
            # another caller moved the parcel first
            logger.info("Parcel status changed concurrently", extra={"number": number})
            return None
        logger.info("Parcel status changed", extra={"number": number, "status": status})
        return status

    def set_status(self, number: int, status: str) -> None:
        self.store.set_status(number, status)
        logger.info("Parcel status set", extra={"number": number, "status": status})

    def change_address(self, number: int, address: str) -> None:
        self.store.set_address(number, address)
        logger.info("Parcel address change requested", extra={"number": number})

    def delete(self, number: int) -> None:
        self.store.delete(number)
        logger.info("Parcel delete requested", extra={"number": number})
