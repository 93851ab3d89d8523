from sqlalchemy import Column, Float, String, Integer, DateTime, LargeBinary, ForeignKey, Index
from sqlalchemy.orm import relationship
from weatherdash.db.base import Base

class Reading(Base):
    __tablename__ = "readings"

    id = Column(Integer, primary_key=True, autoincrement=True)

    device_id = Column(String(64), ForeignKey("devices.id"), nullable=False, index=True)
    device = relationship("Device", back_populates="readings")

    param_id = Column(Integer, nullable=False)                   # 1 = temperature, 2 = humidity
    value = Column(Float, nullable=False)
    device_timestamp = Column(DateTime, nullable=False)          # UTC, as reported by the device
    received_at = Column(DateTime, nullable=False)               # UTC, stamped on ingest
    entry_hash = Column(LargeBinary(32), nullable=False)         # sha256, see reading_service.compute_entry_hash

    __table_args__ = (
        Index("ix_readings_device_param_ts", "device_id", "param_id", "device_timestamp"),
    )
