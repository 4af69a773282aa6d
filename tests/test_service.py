import logging
import re

import pytest

from parcel_tracker.exceptions import ParcelNotFoundError
from parcel_tracker.models import ParcelStatus
from parcel_tracker.service import ParcelService


@pytest.fixture
def service(store):
    return ParcelService(store)


def test_register(service, store):
    parcel = service.register(1000, "test")

    assert parcel.number > 0
    assert parcel.status == ParcelStatus.REGISTERED
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", parcel.created_at)

    stored = store.get(parcel.number)
    assert stored.client == 1000
    assert stored.address == "test"
    assert stored.created_at == parcel.created_at


def test_register_logs(service, caplog):
    with caplog.at_level(logging.INFO, logger="parcel_tracker"):
        parcel = service.register(7, "somewhere")
    assert any(r.message == "Parcel registered" and r.number == parcel.number for r in caplog.records)


def test_next_status_walks_lifecycle(service, store):
    parcel = service.register(1000, "test")

    assert service.next_status(parcel.number) == "sent"
    assert service.next_status(parcel.number) == "delivered"
    assert service.next_status(parcel.number) is None
    assert store.get(parcel.number).status == "delivered"


def test_next_status_unknown_parcel(service):
    with pytest.raises(ParcelNotFoundError):
        service.next_status(31337)


def test_change_address_only_while_registered(service, store):
    parcel = service.register(1000, "first")
    service.change_address(parcel.number, "second")
    assert store.get(parcel.number).address == "second"

    service.next_status(parcel.number)
    service.change_address(parcel.number, "third")
    assert store.get(parcel.number).address == "second"


def test_delete_only_while_registered(service, store):
    kept = service.register(1000, "kept")
    removed = service.register(1000, "removed")
    service.next_status(kept.number)

    service.delete(kept.number)
    service.delete(removed.number)

    assert [p.number for p in service.client_parcels(1000)] == [kept.number]


def test_next_status_does_not_go_backwards(service, store, monkeypatch):
    parcel = service.register(1000, "test")
    real_get = store.get

    def get_then_overtaken(number):
        # the read sees "registered"; another caller then advances the
        # parcel to delivered before this call writes
        seen = real_get(number)
        monkeypatch.setattr(store, "get", real_get)
        service.next_status(number)
        service.next_status(number)
        return seen

    monkeypatch.setattr(store, "get", get_then_overtaken)

    assert service.next_status(parcel.number) is None
    assert store.get(parcel.number).status == "delivered"


def test_get_and_set_status(service):
    parcel = service.register(1000, "test")
    service.set_status(parcel.number, "lost")
    assert service.get(parcel.number).status == "lost"
