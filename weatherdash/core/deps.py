import logging
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from weatherdash.core.errors import Unauthorized
from weatherdash.db.session import SessionLocal
from weatherdash.models.device import Device

logger = logging.getLogger(__name__)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_authenticated_device(
    x_device_id: Optional[str] = Header(None, alias="X-Device-Id"),
    db: Session = Depends(get_db),
) -> Device:
    """
    Static device credential: the X-Device-Id header must name a registered device.
    """
    device_id = (x_device_id or "").strip()
    if not device_id:
        logger.warning("ingest rejected: missing X-Device-Id")
        raise Unauthorized("who are you?")

    device = db.query(Device).filter(Device.id == device_id).first()
    if not device:
        logger.warning("ingest rejected: unknown device %r", device_id)
        raise Unauthorized("unknown device")
    return device


async def read_body(request: Request) -> bytes:
    return await request.body()
