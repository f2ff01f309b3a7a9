"""SQLAlchemy ORM models, imported here so Base.metadata sees them."""

from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.company import CompanyModel
from esg_api.models.energy_consumption import EnergyConsumptionModel
from esg_api.models.sustainability_report import SustainabilityReportModel
from esg_api.models.user import UserModel

__all__ = [
    "CompanyModel",
    "CarbonEmissionModel",
    "EnergyConsumptionModel",
    "SustainabilityReportModel",
    "UserModel",
]
