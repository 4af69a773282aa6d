# parcel_tracker/utils.py
from datetime import datetime, timezone

from .models import ParcelStatus

RFC3339 = "%Y-%m-%dT%H:%M:%SZ"

# registered -> sent -> delivered; delivered is terminal
_NEXT_STATUS = {
    ParcelStatus.REGISTERED.value: ParcelStatus.SENT.value,
    ParcelStatus.SENT.value: ParcelStatus.DELIVERED.value,
}


def format_created_at(moment: datetime | None = None) -> str:
    if moment is None:
        moment = datetime.now(timezone.utc)
    else:
        # naive values are taken as local time
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(RFC3339)


def status_value(status) -> str:
    """Accept either a ParcelStatus or a raw status string."""
    if isinstance(status, ParcelStatus):
        return status.value
    return status


def next_status(current: str) -> str | None:
    return _NEXT_STATUS.get(status_value(current))
