from datetime import datetime
from enum import IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, field_serializer


class Param(IntEnum):
    TEMPERATURE = 1
    HUMIDITY = 2


class ReadingIn(BaseModel):
    """
    Body of POST /weatherListener
    {
        "param_id": 1,
        "value": 21.4,
        "device_timestamp": "2025-06-01T12:00:00Z"
    }
    Numbers must be JSON numbers: "21.4" as a string is rejected, and so
    are NaN and Infinity.
    """
    param_id: StrictInt
    value: float = Field(strict=True, allow_inf_nan=False)
    device_timestamp: datetime


class ReadingOut(BaseModel):
    device_id: str
    param_id: int
    value: float
    device_timestamp: datetime
    received_at: datetime
    entry_hash: bytes

    class Config:
        from_attributes = True

    @field_serializer("entry_hash")
    def _hash_hex(self, entry_hash: bytes) -> str:
        return entry_hash.hex()


class ReadingList(BaseModel):
    device_id: str
    param_id: Optional[int] = None
    readings: List[ReadingOut]
