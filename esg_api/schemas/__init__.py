"""Pydantic schemas for request/response validation."""

from esg_api.schemas.auth import ChangePasswordRequest, LoginRequest, LoginResponse, RegisterRequest, UserInfo
from esg_api.schemas.common import ApiResponse, ErrorResponse, PagedResult, PaginationParams, SortDirection
from esg_api.schemas.company import Company, CompanyCreate, CompanyUpdate
from esg_api.schemas.dashboard import (
    ComparisonEntry,
    ComparisonResult,
    DateWindow,
    EmissionsRankingEntry,
    EnergyRankingEntry,
    ESGStatistics,
    RankingItem,
    ScoreRankingEntry,
    TrendBucket,
)
from esg_api.schemas.emission import CarbonEmission, CarbonEmissionCreate
from esg_api.schemas.energy import EnergyConsumption, EnergyConsumptionCreate, EnergyStatistics
from esg_api.schemas.report import SustainabilityReport, SustainabilityReportCreate

__all__ = [
    "ApiResponse", "ErrorResponse", "PagedResult", "PaginationParams", "SortDirection",
    "Company", "CompanyCreate", "CompanyUpdate",
    "CarbonEmission", "CarbonEmissionCreate",
    "EnergyConsumption", "EnergyConsumptionCreate", "EnergyStatistics",
    "SustainabilityReport", "SustainabilityReportCreate",
    "ESGStatistics", "TrendBucket", "EmissionsRankingEntry", "EnergyRankingEntry",
    "ScoreRankingEntry", "RankingItem", "ComparisonEntry", "ComparisonResult", "DateWindow",
    "LoginRequest", "RegisterRequest", "ChangePasswordRequest", "UserInfo", "LoginResponse",
]
