"""Campaign model: a voice-call script run on behalf of one business."""

import enum
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Enum
from app.core.database import Base


class CampaignStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


DEFAULT_CAMPAIGN_SCRIPT = """Hello, this is [Agent Name] calling from [Business Name].

I hope I'm not catching you at a bad time. I'm reaching out because we specialize in [Service Type] and I noticed you might benefit from our services.

Could I take just 2 minutes to tell you about how we've helped other customers like yourself?

[Wait for response]

Great! We offer [Brief Service Description]. What makes us different is [Unique Value Proposition].

Would you be interested in learning more? I could schedule a quick 15-minute consultation to discuss your specific needs.

What works better for you - this week or next week?"""


class Campaign(Base):
    __tablename__ = "campaigns"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    business_id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    script = Column(Text, nullable=False)
    status = Column(
        Enum(CampaignStatus, name="campaign_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=CampaignStatus.DRAFT,
        index=True,
    )
    scheduled_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
