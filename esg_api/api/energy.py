"""Energy consumption endpoints: listing, statistics, lookup and creation."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from esg_api.dependencies import as_date, get_current_user, get_energy_service, pagination_params
from esg_api.logging_config import get_logger
from esg_api.models.user import UserModel
from esg_api.schemas.common import ApiResponse, PagedResult, PaginationParams
from esg_api.schemas.energy import EnergyConsumption, EnergyConsumptionCreate, EnergyStatistics
from esg_api.services.energy_service import EnergyService

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=ApiResponse[PagedResult[EnergyConsumption]])
def list_energy_consumption(
    params: PaginationParams = Depends(pagination_params),
    svc: EnergyService = Depends(get_energy_service),
) -> ApiResponse[PagedResult[EnergyConsumption]]:
    logger.info("energy_list_requested", page=params.page, page_size=params.page_size, sort_by=params.sort_by)
    result = svc.list(params)
    logger.info("energy_list_completed", returned=len(result.data), total=result.total_records)
    return ApiResponse.ok(result, "Energy consumption records retrieved successfully")


@router.get("/statistics", response_model=ApiResponse[EnergyStatistics])
def get_energy_statistics(
    company_id: Optional[int] = Query(None, alias="companyId"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    svc: EnergyService = Depends(get_energy_service),
) -> ApiResponse[EnergyStatistics]:
    """Consumption, cost and renewable share with per-type and monthly breakdowns."""
    logger.info("energy_statistics_requested", company_id=company_id, start_date=start_date, end_date=end_date)
    stats = svc.statistics(company_id=company_id, start_date=as_date(start_date), end_date=as_date(end_date))
    logger.info("energy_statistics_completed", total=stats.total_consumption)
    return ApiResponse.ok(stats, "Energy statistics calculated successfully")


@router.get("/{record_id}", response_model=ApiResponse[EnergyConsumption])
def get_energy_consumption(
    record_id: int,
    svc: EnergyService = Depends(get_energy_service),
) -> ApiResponse[EnergyConsumption]:
    logger.info("energy_record_requested", record_id=record_id)
    return ApiResponse.ok(svc.get(record_id), "Energy consumption record found")


@router.post("", response_model=ApiResponse[EnergyConsumption], status_code=201)
def create_energy_consumption(
    payload: EnergyConsumptionCreate,
    svc: EnergyService = Depends(get_energy_service),
    user: UserModel = Depends(get_current_user),
) -> ApiResponse[EnergyConsumption]:
    logger.info("energy_create_requested", company_id=payload.company_id, user=user.username)
    created = svc.create(payload)
    logger.info("energy_create_completed", record_id=created.id)
    return ApiResponse.ok(created, "Energy consumption record created successfully")
