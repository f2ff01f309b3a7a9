"""Sustainability report endpoints.

Manual creation rejects a second report for the same company and quarter;
``/generate`` always persists a new, automatically scored report.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from esg_api.dependencies import get_report_service, pagination_params, require_roles
from esg_api.domain.roles import MANAGER_OR_ADMIN
from esg_api.logging_config import get_logger
from esg_api.models.user import UserModel
from esg_api.schemas.common import ApiResponse, PagedResult, PaginationParams
from esg_api.schemas.report import SustainabilityReport, SustainabilityReportCreate
from esg_api.services.report_service import ReportService

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=ApiResponse[PagedResult[SustainabilityReport]])
def list_reports(
    params: PaginationParams = Depends(pagination_params),
    year: Optional[int] = Query(None),
    quarter: Optional[int] = Query(None),
    company_id: Optional[int] = Query(None, alias="companyId"),
    svc: ReportService = Depends(get_report_service),
) -> ApiResponse[PagedResult[SustainabilityReport]]:
    logger.info("reports_list_requested", year=year, quarter=quarter, company_id=company_id, page=params.page)
    result = svc.list(params, year=year, quarter=quarter, company_id=company_id)
    logger.info("reports_list_completed", returned=len(result.data), total=result.total_records)
    return ApiResponse.ok(result, "Sustainability reports retrieved successfully")


@router.get("/{report_id}", response_model=ApiResponse[SustainabilityReport])
def get_report(
    report_id: int,
    svc: ReportService = Depends(get_report_service),
) -> ApiResponse[SustainabilityReport]:
    logger.info("report_requested", report_id=report_id)
    return ApiResponse.ok(svc.get(report_id), "Sustainability report found")


@router.post("", response_model=ApiResponse[SustainabilityReport], status_code=201)
def create_report(
    payload: SustainabilityReportCreate,
    svc: ReportService = Depends(get_report_service),
    user: UserModel = Depends(require_roles(*MANAGER_OR_ADMIN)),
) -> ApiResponse[SustainabilityReport]:
    logger.info(
        "report_create_requested",
        company_id=payload.company_id, year=payload.year, quarter=payload.quarter, user=user.username,
    )
    created = svc.create(payload)
    logger.info("report_create_completed", report_id=created.id)
    return ApiResponse.ok(created, "Sustainability report created successfully")


@router.post("/generate", response_model=ApiResponse[SustainabilityReport], status_code=201)
def generate_report(
    company_id: int = Query(..., alias="companyId"),
    year: int = Query(..., ge=2000, le=2100),
    quarter: int = Query(..., ge=1, le=4),
    svc: ReportService = Depends(get_report_service),
    user: UserModel = Depends(require_roles(*MANAGER_OR_ADMIN)),
) -> ApiResponse[SustainabilityReport]:
    """Aggregate a quarter of records into a new scored report."""
    logger.info(
        "report_generation_requested",
        company_id=company_id, year=year, quarter=quarter, user=user.username,
    )
    report = svc.generate(company_id, year, quarter)
    logger.info("report_generation_completed", report_id=report.id, esg_score=report.esg_score)
    return ApiResponse.ok(report, "Sustainability report generated automatically")
