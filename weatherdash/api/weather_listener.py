# weatherdash/api/weather_listener.py
import logging

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from weatherdash.core.deps import get_authenticated_device, get_db, read_body
from weatherdash.core.errors import BadRequest, Internal
from weatherdash.models.device import Device
from weatherdash.schemas.reading import ReadingIn, ReadingOut
from weatherdash.services.reading_service import save_reading

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingest"])


@router.post("/weatherListener", status_code=status.HTTP_201_CREATED, response_model=ReadingOut)
def post_weather_listener(
    device: Device = Depends(get_authenticated_device),
    body: bytes = Depends(read_body),
    db: Session = Depends(get_db),
):
    """
    Receives one reading from a device.

    Header: X-Device-Id: <registered device id>
    Body:
    {
        "param_id": 1,
        "value": 21.4,
        "device_timestamp": "2025-06-01T12:00:00Z"
    }
    - 401: header missing or device unknown
    - 400: body is not a valid reading
    - 500: the reading could not be stored
    """
    # 1) credential first, then the payload
    try:
        reading_in = ReadingIn.model_validate_json(body)
    except ValidationError as e:
        logger.warning("ingest rejected for %s: %s", device.id, e.errors(include_url=False))
        raise BadRequest("not like that")

    # 2) persist (all or nothing)
    try:
        reading = save_reading(db, device.id, reading_in)
    except SQLAlchemyError:
        logger.exception("failed to save reading for %s", device.id)
        raise Internal("failed to save reading")

    return reading
