"""Data access repositories."""

from esg_api.repositories.base import BaseRepository, DatedRecordRepository
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.repositories.report_repo import ReportRepository
from esg_api.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "DatedRecordRepository",
    "CompanyRepository",
    "EmissionRepository",
    "EnergyRepository",
    "ReportRepository",
    "UserRepository",
]
