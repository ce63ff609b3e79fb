"""Per-user integration switches.

These are placeholders for outbound channels; nothing in the service
dials, texts or emails based on them.
"""

from sqlalchemy import Column, String, Boolean, Integer, DateTime
from datetime import datetime
from app.core.database import Base


class IntegrationSettings(Base):
    __tablename__ = "integration_settings"

    user_id = Column(String(128), primary_key=True)
    voice_enabled = Column(Boolean, nullable=False, default=True)
    whatsapp_enabled = Column(Boolean, nullable=False, default=False)
    email_enabled = Column(Boolean, nullable=False, default=False)
    auto_followup = Column(Boolean, nullable=False, default=True)
    followup_delay_hours = Column(Integer, nullable=False, default=24)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
