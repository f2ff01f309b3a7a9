"""Dependency injection / factory functions for FastAPI.

Every service is constructed here with its full dependency tree, one per
request, sharing the request's database session.
"""

from datetime import date, datetime
from functools import lru_cache
from typing import Callable, Optional

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from esg_api.config import Settings
from esg_api.database import get_db
from esg_api.domain.roles import UserRole
from esg_api.engines.aggregation import ESGAggregator
from esg_api.engines.report_generator import ReportGenerator
from esg_api.errors import AuthenticationError, PermissionDeniedError
from esg_api.models.user import UserModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.repositories.report_repo import ReportRepository
from esg_api.repositories.user_repo import UserRepository
from esg_api.schemas.common import PaginationParams, SortDirection
from esg_api.security import decode_access_token
from esg_api.services.auth_service import AuthService
from esg_api.services.company_service import CompanyService
from esg_api.services.dashboard_service import DashboardService
from esg_api.services.emission_service import EmissionService
from esg_api.services.energy_service import EnergyService
from esg_api.services.report_service import ReportService


@lru_cache
def get_settings() -> Settings:
    return Settings()


# ── Singletons (stateless, reusable) ────────────────────────────────────

@lru_cache
def get_aggregator() -> ESGAggregator:
    return ESGAggregator()


@lru_cache
def get_report_generator() -> ReportGenerator:
    return ReportGenerator()


# ── Per-request (need a DB session) ─────────────────────────────────────

def get_company_service(db: Session = Depends(get_db)) -> CompanyService:
    return CompanyService(db=db, company_repo=CompanyRepository(db))


def get_emission_service(db: Session = Depends(get_db)) -> EmissionService:
    return EmissionService(
        db=db,
        emission_repo=EmissionRepository(db),
        company_repo=CompanyRepository(db),
    )


def get_energy_service(db: Session = Depends(get_db)) -> EnergyService:
    return EnergyService(
        db=db,
        energy_repo=EnergyRepository(db),
        company_repo=CompanyRepository(db),
        aggregator=get_aggregator(),
    )


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(
        db=db,
        report_repo=ReportRepository(db),
        company_repo=CompanyRepository(db),
        emission_repo=EmissionRepository(db),
        energy_repo=EnergyRepository(db),
        generator=get_report_generator(),
    )


def get_dashboard_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> DashboardService:
    return DashboardService(
        company_repo=CompanyRepository(db),
        emission_repo=EmissionRepository(db),
        energy_repo=EnergyRepository(db),
        report_repo=ReportRepository(db),
        aggregator=get_aggregator(),
        max_ranking_limit=settings.ranking_max_limit,
        max_comparison_companies=settings.comparison_max_companies,
    )


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(
        db=db,
        user_repo=UserRepository(db),
        company_repo=CompanyRepository(db),
        settings=settings,
    )


# ── Query parameters ────────────────────────────────────────────────────

def as_date(value: Optional[datetime]) -> Optional[date]:
    """Date filters accept a full timestamp but only the calendar day counts."""
    return value.date() if value is not None else None


def pagination_params(
    page: int = Query(1),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_direction: str = Query("asc", alias="sortDirection"),
    settings: Settings = Depends(get_settings),
) -> PaginationParams:
    params = PaginationParams(
        page=page,
        page_size=page_size or settings.default_page_size,
        search_term=search_term,
        start_date=as_date(start_date),
        end_date=as_date(end_date),
        sort_by=sort_by,
        sort_direction=SortDirection.DESC if sort_direction.lower() == "desc" else SortDirection.ASC,
    )
    return params.normalized(settings.default_page_size, settings.max_page_size)


# ── Authentication ──────────────────────────────────────────────────────

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserModel:
    """Resolve the bearer token to an active user."""
    if credentials is None:
        raise AuthenticationError("Authentication required")

    claims = decode_access_token(credentials.credentials, settings)
    try:
        user_id = int(claims.get("sub"))
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token subject")

    user = UserRepository(db).get(user_id)
    if user is None or not user.is_active:
        raise AuthenticationError("User is inactive or no longer exists")
    return user


def require_roles(*roles: UserRole) -> Callable[..., UserModel]:
    """Dependency factory admitting only users holding one of ``roles``."""
    allowed = {r.value for r in roles}

    def checker(user: UserModel = Depends(get_current_user)) -> UserModel:
        if user.role not in allowed:
            raise PermissionDeniedError(
                "You do not have permission to perform this action",
                details=f"required one of: {', '.join(sorted(allowed))}",
            )
        return user

    return checker
