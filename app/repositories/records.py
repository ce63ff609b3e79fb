"""One repository per entity, plus the bundle handed to endpoints."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.models.appointment import Appointment
from app.models.business import Business
from app.models.campaign import Campaign
from app.models.interaction import Interaction
from app.models.lead import Lead
from app.repositories.base import RecordRepository, SqlAlchemyRepository
from app.schemas.appointment import AppointmentOut
from app.schemas.business import BusinessOut
from app.schemas.campaign import CampaignOut
from app.schemas.interaction import InteractionOut
from app.schemas.lead import LeadOut


class BusinessRepository(SqlAlchemyRepository[BusinessOut]):
    entity = "business"
    model = Business
    schema = BusinessOut


class LeadRepository(SqlAlchemyRepository[LeadOut]):
    entity = "lead"
    model = Lead
    schema = LeadOut


class CampaignRepository(SqlAlchemyRepository[CampaignOut]):
    entity = "campaign"
    model = Campaign
    schema = CampaignOut


class AppointmentRepository(SqlAlchemyRepository[AppointmentOut]):
    entity = "appointment"
    model = Appointment
    schema = AppointmentOut


class InteractionRepository(SqlAlchemyRepository[InteractionOut]):
    entity = "interaction"
    model = Interaction
    schema = InteractionOut


@dataclass
class Repositories:
    businesses: RecordRepository[BusinessOut]
    leads: RecordRepository[LeadOut]
    campaigns: RecordRepository[CampaignOut]
    appointments: RecordRepository[AppointmentOut]
    interactions: RecordRepository[InteractionOut]

    @classmethod
    def from_session_factory(cls, session_factory: async_sessionmaker) -> "Repositories":
        return cls(
            businesses=BusinessRepository(session_factory),
            leads=LeadRepository(session_factory),
            campaigns=CampaignRepository(session_factory),
            appointments=AppointmentRepository(session_factory),
            interactions=InteractionRepository(session_factory),
        )
