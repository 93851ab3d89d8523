# weatherdash/schemas/dashboard.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class ChartPoint(BaseModel):
    value: float
    timestamp: datetime
    x: float
    y: float
    formatted_time: str


class ChartData(BaseModel):
    points: List[ChartPoint] = []
    min: float = 0.0            # unpadded series minimum
    max: float = 0.0            # unpadded series maximum
    plot_min: float = 0.0       # padded bounds used for the geometry
    plot_max: float = 0.0
    line_path: str = ""
    area_path: str = ""


class DeviceStatus(BaseModel):
    id: str
    location: str
    last_seen: Optional[datetime] = None
    is_online: bool = False
    formatted_last_seen: str = "never"
    last_temperature: Optional[float] = None
    last_humidity: Optional[float] = None


class DeviceDetail(BaseModel):
    device: DeviceStatus
    temperature_chart: ChartData
    humidity_chart: ChartData


class DevicesView(BaseModel):
    devices: List[DeviceStatus]


class AddDeviceForm(BaseModel):
    device_id: str = ""
    location: str = ""
    error: Optional[str] = None
