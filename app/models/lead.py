"""Lead model."""
import enum
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Enum
from app.core.database import Base


class LeadStatus(str, enum.Enum):
    """Lead status enum."""
    NEW = "new"
    CONTACTED = "contacted"
    INTERESTED = "interested"
    CONVERTED = "converted"
    NOT_INTERESTED = "not_interested"


class Lead(Base):
    """Lead model."""
    __tablename__ = "leads"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    # No FK: a deleted business leaves the reference dangling
    business_id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255), nullable=True)
    status = Column(
        Enum(LeadStatus, name="lead_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=LeadStatus.NEW,
        index=True,
    )
    source = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
