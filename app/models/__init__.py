from app.models.business import Business  # noqa: F401
from app.models.lead import Lead  # noqa: F401
from app.models.campaign import Campaign  # noqa: F401
from app.models.appointment import Appointment  # noqa: F401
from app.models.interaction import Interaction  # noqa: F401
from app.models.integration_settings import IntegrationSettings  # noqa: F401
