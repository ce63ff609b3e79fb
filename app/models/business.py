"""Business model.

A business is the identity that leads, campaigns and appointments are
filed under. Deleting one does not cascade; dependent rows keep the
dangling business_id and render with a fallback name.
"""

from sqlalchemy import Column, String, DateTime, Text
from datetime import datetime
from app.core.database import Base


SERVICE_TYPES = [
    "Salon & Beauty",
    "Plumbing",
    "Fitness & Personal Training",
    "Real Estate",
    "Consulting",
    "Home Services",
    "Healthcare",
    "Legal Services",
    "Marketing Agency",
    "Restaurant",
    "Retail",
    "Other",
]


class Business(Base):
    __tablename__ = "businesses"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    service_type = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
