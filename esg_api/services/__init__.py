"""Service-layer orchestration modules."""

from esg_api.services.auth_service import AuthService
from esg_api.services.company_service import CompanyService
from esg_api.services.dashboard_service import DashboardService
from esg_api.services.emission_service import EmissionService
from esg_api.services.energy_service import EnergyService
from esg_api.services.report_service import ReportService

__all__ = [
    "AuthService",
    "CompanyService",
    "DashboardService",
    "EmissionService",
    "EnergyService",
    "ReportService",
]
