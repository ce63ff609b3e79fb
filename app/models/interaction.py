import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, Enum, Integer
from app.core.database import Base


class InteractionType(str, enum.Enum):
    CALL = "call"
    WHATSAPP = "whatsapp"
    EMAIL = "email"


class InteractionStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Interaction(Base):
    __tablename__ = "interactions"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    lead_id = Column(String(64), nullable=False, index=True)
    campaign_id = Column(String(64), nullable=True, index=True)  # None for manual contact
    type = Column(
        Enum(InteractionType, name="interaction_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    status = Column(
        Enum(InteractionStatus, name="interaction_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=InteractionStatus.PENDING,
    )
    content = Column(Text, nullable=True)
    response = Column(Text, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
