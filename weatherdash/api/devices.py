# weatherdash/api/devices.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from weatherdash.core.deps import get_db
from weatherdash.core.errors import NotFound
from weatherdash.schemas.dashboard import DeviceDetail, DeviceStatus
from weatherdash.schemas.reading import ReadingList, ReadingOut
from weatherdash.services import device_service
from weatherdash.services.reading_service import list_readings

router = APIRouter(prefix="/api/devices", tags=["devices"])


@router.get("", response_model=List[DeviceStatus])
def list_devices(db: Session = Depends(get_db)):
    return device_service.list_device_statuses(db)


@router.get("/{device_id}", response_model=DeviceDetail)
def get_device(device_id: str, db: Session = Depends(get_db)):
    return device_service.get_device_detail(db, device_id)


@router.get("/{device_id}/readings", response_model=ReadingList)
def get_device_readings(
    device_id: str,
    param_id: Optional[int] = Query(None, description="1 = temperature, 2 = humidity"),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    """Newest-first readings of a device, optionally for one parameter."""
    if not device_service.device_exists(db, device_id):
        raise NotFound("device not found")

    readings = list_readings(db, device_id, param_id=param_id, limit=limit)
    return ReadingList(
        device_id=device_id,
        param_id=param_id,
        readings=[ReadingOut.model_validate(r) for r in readings],
    )
