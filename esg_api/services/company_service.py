"""Company registry: list, fetch, create, update and delete."""

import logging

from sqlalchemy.orm import Session

from esg_api.errors import ConflictError, NotFoundError
from esg_api.models.company import CompanyModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.schemas.common import PagedResult, PaginationParams
from esg_api.schemas.company import Company, CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)

COMPANY_NOT_FOUND = "Company not found"
DUPLICATE_CNPJ = "A company with this CNPJ already exists"


class CompanyService:
    def __init__(self, db: Session, company_repo: CompanyRepository):
        self.db = db
        self.companies = company_repo

    def list(self, params: PaginationParams) -> PagedResult[Company]:
        rows, total = self.companies.list_page(params)
        return PagedResult[Company].build(
            [Company.model_validate(r) for r in rows], params.page, params.page_size, total
        )

    def get(self, company_id: int) -> Company:
        return Company.model_validate(self._require(company_id))

    def create(self, data: CompanyCreate) -> Company:
        if self.companies.get_by_cnpj(data.cnpj):
            raise ConflictError(DUPLICATE_CNPJ, details=f"cnpj={data.cnpj}")

        company = self.companies.create(CompanyModel(**data.model_dump()))
        self.db.commit()
        self.db.refresh(company)
        logger.info("Created company %s (%s)", company.id, company.cnpj)
        return Company.model_validate(company)

    def update(self, company_id: int, data: CompanyUpdate) -> Company:
        company = self._require(company_id)
        other = self.companies.get_by_cnpj(data.cnpj)
        if other is not None and other.id != company_id:
            raise ConflictError(DUPLICATE_CNPJ, details=f"cnpj={data.cnpj}")

        for field, value in data.model_dump().items():
            setattr(company, field, value)
        self.companies.update(company)
        self.db.commit()
        self.db.refresh(company)
        logger.info("Updated company %s", company_id)
        return Company.model_validate(company)

    def delete(self, company_id: int) -> None:
        """Delete a company and, by cascade, its emissions, energy records and reports."""
        if not self.companies.delete(company_id):
            raise NotFoundError(COMPANY_NOT_FOUND, details=f"id={company_id}")
        self.db.commit()
        logger.info("Deleted company %s", company_id)

    def _require(self, company_id: int) -> CompanyModel:
        company = self.companies.get(company_id)
        if company is None:
            raise NotFoundError(COMPANY_NOT_FOUND, details=f"id={company_id}")
        return company
