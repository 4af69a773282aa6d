# parcel_tracker/store.py
"""
Data access for the ``parcel`` table.

Every operation runs exactly one SQL statement in its own short
transaction on a session taken from the shared factory. Database errors
are not caught here; callers see the ``sqlalchemy.exc`` exception as
raised by the driver layer.
"""

from typing import List

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.orm import sessionmaker

from .exceptions import ParcelNotFoundError
from .models import Parcel, ParcelStatus
from .utils import status_value

parcel_table = Parcel.__table__


def _to_parcel(row) -> Parcel:
    # transient instance, never attached to a session
    return Parcel(**row._mapping)


class ParcelStore:
    """
    Parcel persistence over an already configured session factory.

    The store neither opens nor closes the engine and never creates the
    schema. Mutations that affect no rows (unknown number, or a status
    other than registered for the conditional ones) complete silently.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def add(self, parcel: Parcel) -> int:
        """Insert a parcel and return the number the database assigned to it."""
        values = {
            "client": parcel.client,
            "address": parcel.address,
            "created_at": parcel.created_at,
        }
        # no status given: the column default (registered) applies
        if parcel.status is not None:
            values["status"] = status_value(parcel.status)
        stmt = insert(parcel_table).values(**values)
        with self.session_factory.begin() as db:
            result = db.execute(stmt)
            return result.inserted_primary_key[0]

    def get(self, number: int) -> Parcel:
        stmt = select(parcel_table).where(parcel_table.c.number == number)
        with self.session_factory.begin() as db:
            row = db.execute(stmt).first()
        if row is None:
            raise ParcelNotFoundError(number)
        return _to_parcel(row)

    def get_by_client(self, client: int) -> List[Parcel]:
        # no ORDER BY: row order is whatever the database returns
        stmt = select(parcel_table).where(parcel_table.c.client == client)
        with self.session_factory.begin() as db:
            rows = db.execute(stmt).all()
        return [_to_parcel(row) for row in rows]

    def set_status(self, number: int, status: str) -> None:
        stmt = (update(parcel_table)
                .where(parcel_table.c.number == number)
                .values(status=status_value(status)))
        with self.session_factory.begin() as db:
            db.execute(stmt)

    def advance_status(self, number: int, current: str, status: str) -> int:
        """Move from `current` to `status` only if the parcel is still at `current`; returns rows changed."""
        stmt = (update(parcel_table)
                .where(and_(parcel_table.c.number == number,
                            parcel_table.c.status == status_value(current)))
                .values(status=status_value(status)))
        with self.session_factory.begin() as db:
            result = db.execute(stmt)
            return result.rowcount

    def set_address(self, number: int, address: str) -> None:
        """Change the address, only while the parcel is still registered."""
        stmt = (update(parcel_table)
                .where(and_(parcel_table.c.number == number,
                            parcel_table.c.status == ParcelStatus.REGISTERED.value))
                .values(address=address))
        with self.session_factory.begin() as db:
            db.execute(stmt)

    def delete(self, number: int) -> None:
        """Remove the parcel, only while it is still registered."""
        stmt = (delete(parcel_table)
                .where(and_(parcel_table.c.number == number,
                            parcel_table.c.status == ParcelStatus.REGISTERED.value)))
        with self.session_factory.begin() as db:
            db.execute(stmt)
