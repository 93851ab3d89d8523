from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from weatherdash.db.base import Base

class Device(Base):
    __tablename__ = "devices"

    id = Column(String(64), primary_key=True)          # ex: "esp32-garden"
    location = Column(String(255), nullable=False)     # ex: "Greenhouse, north wall"

    readings = relationship("Reading", back_populates="device", passive_deletes=True)
