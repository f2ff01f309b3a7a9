"""Carbon emission endpoints: paged listing, lookup and creation."""

from fastapi import APIRouter, Depends

from esg_api.dependencies import get_current_user, get_emission_service, pagination_params
from esg_api.logging_config import get_logger
from esg_api.models.user import UserModel
from esg_api.schemas.common import ApiResponse, PagedResult, PaginationParams
from esg_api.schemas.emission import CarbonEmission, CarbonEmissionCreate
from esg_api.services.emission_service import EmissionService

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=ApiResponse[PagedResult[CarbonEmission]])
def list_emissions(
    params: PaginationParams = Depends(pagination_params),
    svc: EmissionService = Depends(get_emission_service),
) -> ApiResponse[PagedResult[CarbonEmission]]:
    logger.info("emissions_list_requested", page=params.page, page_size=params.page_size, sort_by=params.sort_by)
    result = svc.list(params)
    logger.info("emissions_list_completed", returned=len(result.data), total=result.total_records)
    return ApiResponse.ok(result, "Carbon emissions retrieved successfully")


@router.get("/{emission_id}", response_model=ApiResponse[CarbonEmission])
def get_emission(
    emission_id: int,
    svc: EmissionService = Depends(get_emission_service),
) -> ApiResponse[CarbonEmission]:
    logger.info("emission_requested", emission_id=emission_id)
    return ApiResponse.ok(svc.get(emission_id), "Carbon emission found")


@router.post("", response_model=ApiResponse[CarbonEmission], status_code=201)
def create_emission(
    payload: CarbonEmissionCreate,
    svc: EmissionService = Depends(get_emission_service),
    user: UserModel = Depends(get_current_user),
) -> ApiResponse[CarbonEmission]:
    """Record a new emission; the referenced company must exist."""
    logger.info("emission_create_requested", company_id=payload.company_id, user=user.username)
    created = svc.create(payload)
    logger.info("emission_create_completed", emission_id=created.id)
    return ApiResponse.ok(created, "Carbon emission created successfully")
