"""Company endpoints: listing, lookup and administration."""

from fastapi import APIRouter, Depends

from esg_api.dependencies import get_company_service, pagination_params, require_roles
from esg_api.domain.roles import ADMIN_ONLY, MANAGER_OR_ADMIN
from esg_api.logging_config import get_logger
from esg_api.models.user import UserModel
from esg_api.schemas.common import ApiResponse, PagedResult, PaginationParams
from esg_api.schemas.company import Company, CompanyCreate, CompanyUpdate
from esg_api.services.company_service import CompanyService

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=ApiResponse[PagedResult[Company]])
def list_companies(
    params: PaginationParams = Depends(pagination_params),
    svc: CompanyService = Depends(get_company_service),
) -> ApiResponse[PagedResult[Company]]:
    logger.info("companies_list_requested", page=params.page, search=params.search_term)
    result = svc.list(params)
    logger.info("companies_list_completed", returned=len(result.data), total=result.total_records)
    return ApiResponse.ok(result, "Companies retrieved successfully")


@router.get("/{company_id}", response_model=ApiResponse[Company])
def get_company(
    company_id: int,
    svc: CompanyService = Depends(get_company_service),
) -> ApiResponse[Company]:
    logger.info("company_requested", company_id=company_id)
    return ApiResponse.ok(svc.get(company_id), "Company found")


@router.post("", response_model=ApiResponse[Company], status_code=201)
def create_company(
    payload: CompanyCreate,
    svc: CompanyService = Depends(get_company_service),
    user: UserModel = Depends(require_roles(*MANAGER_OR_ADMIN)),
) -> ApiResponse[Company]:
    logger.info("company_create_requested", cnpj=payload.cnpj, user=user.username)
    created = svc.create(payload)
    logger.info("company_create_completed", company_id=created.id)
    return ApiResponse.ok(created, "Company created successfully")


@router.put("/{company_id}", response_model=ApiResponse[Company])
def update_company(
    company_id: int,
    payload: CompanyUpdate,
    svc: CompanyService = Depends(get_company_service),
    user: UserModel = Depends(require_roles(*MANAGER_OR_ADMIN)),
) -> ApiResponse[Company]:
    logger.info("company_update_requested", company_id=company_id, user=user.username)
    return ApiResponse.ok(svc.update(company_id, payload), "Company updated successfully")


@router.delete("/{company_id}", response_model=ApiResponse[None])
def delete_company(
    company_id: int,
    svc: CompanyService = Depends(get_company_service),
    user: UserModel = Depends(require_roles(*ADMIN_ONLY)),
) -> ApiResponse[None]:
    """Delete a company together with all of its records and reports."""
    logger.info("company_delete_requested", company_id=company_id, user=user.username)
    svc.delete(company_id)
    logger.info("company_delete_completed", company_id=company_id)
    return ApiResponse.ok(None, "Company deleted successfully")
