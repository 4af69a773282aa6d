# parcel_tracker/models.py
import enum

from sqlalchemy import Column, Integer, String

from .db import Base


class ParcelStatus(str, enum.Enum):
    """
    Parcel lifecycle stages.

    Status flow:
        REGISTERED -> SENT -> DELIVERED
    Address changes and deletion are only allowed while REGISTERED.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


class Parcel(Base):
    __tablename__ = "parcel"
    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, index=True, nullable=False)
    status = Column(String, nullable=False, default=ParcelStatus.REGISTERED.value)
    address = Column(String, nullable=False)
    created_at = Column(String, nullable=False)  # RFC3339, UTC

    def __repr__(self):
        return (f"<Parcel(number={self.number}, client={self.client}, "
                f"status='{self.status}', address='{self.address}')>")
