# parcel_tracker/api.py
from typing import List

from fastapi import Depends, FastAPI
from pydantic import BaseModel, ConfigDict, Field

from .config import settings
from .db import SessionLocal, init_db
from .exceptions import ParcelTrackerError, tracker_exception_handler
from .service import ParcelService
from .store import ParcelStore

app = FastAPI(title=settings.app_name)
app.add_exception_handler(ParcelTrackerError, tracker_exception_handler)


# Startup: init DB
@app.on_event("startup")
def on_startup():
    init_db()


def get_store() -> ParcelStore:
    return ParcelStore(SessionLocal)


def get_service(store: ParcelStore = Depends(get_store)) -> ParcelService:
    return ParcelService(store)


# Pydantic input/output models
class ParcelIn(BaseModel):
    client: int
    address: str = Field(..., min_length=1)


class ParcelOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    number: int
    client: int
    status: str
    address: str
    created_at: str


class StatusIn(BaseModel):
    status: str = Field(..., min_length=1)


class AddressIn(BaseModel):
    address: str = Field(..., min_length=1)


# ---------------------------
# Register parcel
# ---------------------------
@app.post("/api/parcels", status_code=201, response_model=ParcelOut)
def create_parcel(p: ParcelIn, service: ParcelService = Depends(get_service)):
    return service.register(p.client, p.address)


# ---------------------------
# Get single parcel
# ---------------------------
@app.get("/api/parcels/{number}", response_model=ParcelOut)
def get_parcel(number: int, service: ParcelService = Depends(get_service)):
    return service.get(number)


# ---------------------------
# List a client's parcels (unordered)
# ---------------------------
@app.get("/api/clients/{client}/parcels", response_model=List[ParcelOut])
def list_client_parcels(client: int, service: ParcelService = Depends(get_service)):
    return service.client_parcels(client)


# ---------------------------
# Mutations. A parcel that is missing, or no longer registered for
# address/delete, is left untouched and the call still succeeds.
# ---------------------------
@app.post("/api/parcels/{number}/status")
def set_status(number: int, body: StatusIn, service: ParcelService = Depends(get_service)):
    service.set_status(number, body.status)
    return {"ok": True}


@app.post("/api/parcels/{number}/next")
def advance_status(number: int, service: ParcelService = Depends(get_service)):
    status = service.next_status(number)
    return {"number": number, "status": status}


@app.post("/api/parcels/{number}/address")
def change_address(number: int, body: AddressIn, service: ParcelService = Depends(get_service)):
    service.change_address(number, body.address)
    return {"ok": True}


@app.delete("/api/parcels/{number}")
def delete_parcel(number: int, service: ParcelService = Depends(get_service)):
    service.delete(number)
    return {"ok": True}
