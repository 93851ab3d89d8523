# weatherdash/services/device_service.py
import logging
import re
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from weatherdash.core.errors import BadRequest, NotFound
from weatherdash.models.device import Device
from weatherdash.models.reading import Reading
from weatherdash.schemas.dashboard import DeviceDetail, DeviceStatus
from weatherdash.schemas.reading import Param
from weatherdash.services.charts import DEFAULT_LIMIT, build_chart
from weatherdash.services.liveness import liveness_status
from weatherdash.services.reading_service import fetch_series, latest_values

logger = logging.getLogger(__name__)

MAX_DEVICE_ID_LENGTH = 64
# ids end up in /device/{id} URLs; no leading dot so "." and ".." stay out
DEVICE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-][A-Za-z0-9._-]*$")


def _status_query(db: Session):
    # devices LEFT JOIN readings -> (id, location, last_seen)
    return (
        db.query(Device.id, Device.location, func.max(Reading.received_at).label("last_seen"))
        .outerjoin(Reading, Reading.device_id == Device.id)
        .group_by(Device.id, Device.location)
    )


def _to_status(row, latest: dict, now: Optional[datetime]) -> DeviceStatus:
    device_id, location, last_seen = row
    liveness = liveness_status(last_seen, now)
    return DeviceStatus(
        id=device_id,
        location=location,
        last_seen=last_seen,
        is_online=liveness.is_online,
        formatted_last_seen=liveness.formatted,
        last_temperature=latest.get((device_id, int(Param.TEMPERATURE))),
        last_humidity=latest.get((device_id, int(Param.HUMIDITY))),
    )


def list_device_statuses(db: Session, now: Optional[datetime] = None) -> List[DeviceStatus]:
    """
    Every device with its liveness and latest temperature/humidity.
    Two queries in total, whatever the number of devices.
    """
    rows = _status_query(db).order_by(Device.id).all()
    latest = latest_values(db)
    return [_to_status(row, latest, now) for row in rows]


def get_device_status(db: Session, device_id: str, now: Optional[datetime] = None) -> DeviceStatus:
    row = _status_query(db).filter(Device.id == device_id).first()
    if row is None:
        raise NotFound("device not found")

    latest = latest_values(db, device_ids=[device_id])
    return _to_status(row, latest, now)


def get_device_detail(db: Session, device_id: str, now: Optional[datetime] = None) -> DeviceDetail:
    device = get_device_status(db, device_id, now)

    return DeviceDetail(
        device=device,
        temperature_chart=build_chart(fetch_series(db, device_id, Param.TEMPERATURE, DEFAULT_LIMIT)),
        humidity_chart=build_chart(fetch_series(db, device_id, Param.HUMIDITY, DEFAULT_LIMIT)),
    )


def device_exists(db: Session, device_id: str) -> bool:
    return db.query(Device.id).filter(Device.id == device_id).first() is not None


def create_device(db: Session, device_id: str, location: str) -> Device:
    device_id = (device_id or "").strip()
    location = (location or "").strip()

    if not device_id or not location:
        raise BadRequest("Device ID and location are required")

    if len(device_id) > MAX_DEVICE_ID_LENGTH:
        raise BadRequest(f"Device ID must be {MAX_DEVICE_ID_LENGTH} characters or less")

    if not DEVICE_ID_PATTERN.match(device_id):
        raise BadRequest("Device ID may only contain letters, digits, '.', '_' and '-', and cannot start with '.'")

    if device_exists(db, device_id):
        raise BadRequest("A device with this ID already exists")

    device = Device(id=device_id, location=location)
    try:
        db.add(device)
        db.commit()
    except IntegrityError:
        # created concurrently between the check and the insert
        db.rollback()
        raise BadRequest("A device with this ID already exists")
    except Exception:
        db.rollback()
        raise

    logger.info("device created id=%s location=%s", device_id, location)
    return device


def delete_device(db: Session, device_id: str) -> None:
    """
    Removes the device and all of its readings in a single transaction.
    Readings go first (foreign key).
    """
    if not device_exists(db, device_id):
        raise NotFound("device not found")

    try:
        removed = (
            db.query(Reading)
            .filter(Reading.device_id == device_id)
            .delete(synchronize_session=False)
        )
        db.query(Device).filter(Device.id == device_id).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("device deleted id=%s readings_removed=%s", device_id, removed)
