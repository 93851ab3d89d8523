# weatherdash/services/reading_service.py
import hashlib
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from weatherdash.core.clock import to_naive_utc, utcnow
from weatherdash.models.reading import Reading
from weatherdash.schemas.reading import Param, ReadingIn

logger = logging.getLogger(__name__)


def format_rfc3339_nano(ts: datetime) -> str:
    """
    RFC 3339 in UTC with the fractional seconds trimmed of trailing zeros
    (and dropped entirely when zero), ending in "Z".
      2025-06-01T12:00:00Z
      2025-06-01T12:00:00.5Z
      2025-06-01T12:00:00.000123Z
    """
    ts = to_naive_utc(ts)
    text = ts.strftime("%Y-%m-%dT%H:%M:%S")
    if ts.microsecond:
        text += "." + f"{ts.microsecond:06d}".rstrip("0")
    return text + "Z"


def compute_entry_hash(device_id: str, param_id: int, value: float, device_timestamp: datetime) -> bytes:
    """
    sha256 of "<device_id>:<param_id>:<value, 6 decimals>:<device_timestamp RFC3339>".
    Deterministic: the same four fields always give the same 32 bytes.
    """
    payload = f"{device_id}:{param_id}:{value:f}:{format_rfc3339_nano(device_timestamp)}"
    return hashlib.sha256(payload.encode("utf-8")).digest()


def save_reading(db: Session, device_id: str, reading_in: ReadingIn) -> Reading:
    """
    Stores one reading. All or nothing: on any storage error the
    transaction is rolled back and the error propagates.
    """
    device_timestamp = to_naive_utc(reading_in.device_timestamp)

    reading = Reading(
        device_id=device_id,
        param_id=reading_in.param_id,
        value=reading_in.value,
        device_timestamp=device_timestamp,
        received_at=utcnow(),
        entry_hash=compute_entry_hash(device_id, reading_in.param_id, reading_in.value, device_timestamp),
    )

    try:
        db.add(reading)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(reading)
    logger.debug("stored reading device=%s param=%s value=%s", device_id, reading.param_id, reading.value)
    return reading


def fetch_series(db: Session, device_id: str, param_id: int, limit: int = 24) -> List[Tuple[float, datetime]]:
    """Newest-first (value, device_timestamp) pairs for one device+parameter."""
    rows = (
        db.query(Reading.value, Reading.device_timestamp)
        .filter(Reading.device_id == device_id, Reading.param_id == param_id)
        .order_by(Reading.device_timestamp.desc())
        .limit(limit)
        .all()
    )
    return [(value, ts) for value, ts in rows]


def list_readings(db: Session, device_id: str, param_id: Optional[int] = None, limit: int = 100) -> List[Reading]:
    q = db.query(Reading).filter(Reading.device_id == device_id)
    if param_id is not None:
        q = q.filter(Reading.param_id == param_id)
    return q.order_by(Reading.device_timestamp.desc()).limit(limit).all()


def latest_values(
    db: Session,
    device_ids: Optional[Iterable[str]] = None,
    params: Iterable[int] = (Param.TEMPERATURE, Param.HUMIDITY),
) -> Dict[Tuple[str, int], float]:
    """
    Latest value per (device_id, param_id), in one query for every device
    instead of one query per device and parameter.
    Devices that never reported a parameter are simply absent from the result.
    """
    params = [int(p) for p in params]

    latest_ts = (
        db.query(
            Reading.device_id.label("device_id"),
            Reading.param_id.label("param_id"),
            func.max(Reading.device_timestamp).label("ts"),
        )
        .filter(Reading.param_id.in_(params))
    )
    if device_ids is not None:
        latest_ts = latest_ts.filter(Reading.device_id.in_(list(device_ids)))
    latest_ts = latest_ts.group_by(Reading.device_id, Reading.param_id).subquery()

    rows = (
        db.query(Reading.device_id, Reading.param_id, Reading.value)
        .join(
            latest_ts,
            (Reading.device_id == latest_ts.c.device_id)
            & (Reading.param_id == latest_ts.c.param_id)
            & (Reading.device_timestamp == latest_ts.c.ts),
        )
        .order_by(Reading.id)
        .all()
    )

    # ties on device_timestamp: the last inserted row wins
    return {(device_id, param_id): value for device_id, param_id, value in rows}
