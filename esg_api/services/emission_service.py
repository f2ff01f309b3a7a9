"""Carbon emission records."""

import logging

from sqlalchemy.orm import Session

from esg_api.errors import CompanyNotFoundError, NotFoundError
from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.schemas.common import PagedResult, PaginationParams
from esg_api.schemas.emission import CarbonEmission, CarbonEmissionCreate

logger = logging.getLogger(__name__)


class EmissionService:
    def __init__(self, db: Session, emission_repo: EmissionRepository, company_repo: CompanyRepository):
        self.db = db
        self.emissions = emission_repo
        self.companies = company_repo

    def list(self, params: PaginationParams) -> PagedResult[CarbonEmission]:
        rows, total = self.emissions.list_page(params)
        return PagedResult[CarbonEmission].build(
            [CarbonEmission.model_validate(r) for r in rows], params.page, params.page_size, total
        )

    def get(self, emission_id: int) -> CarbonEmission:
        row = self.emissions.get(emission_id)
        if row is None:
            raise NotFoundError("Carbon emission not found", details=f"id={emission_id}")
        return CarbonEmission.model_validate(row)

    def create(self, data: CarbonEmissionCreate) -> CarbonEmission:
        if self.companies.get(data.company_id) is None:
            raise CompanyNotFoundError(data.company_id)

        row = self.emissions.create(CarbonEmissionModel(**data.model_dump()))
        self.db.commit()
        self.db.refresh(row)
        logger.info(
            "Recorded %.2f %s for company %s on %s",
            row.emission_amount, row.unit, row.company_id, row.record_date,
        )
        return CarbonEmission.model_validate(row)
