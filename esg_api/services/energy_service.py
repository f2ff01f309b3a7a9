"""Energy consumption records and their statistics."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from esg_api.engines.aggregation import ESGAggregator
from esg_api.errors import CompanyNotFoundError, NotFoundError
from esg_api.models.energy_consumption import EnergyConsumptionModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.schemas.common import PagedResult, PaginationParams
from esg_api.schemas.energy import EnergyConsumption, EnergyConsumptionCreate, EnergyStatistics

logger = logging.getLogger(__name__)


class EnergyService:
    def __init__(
        self,
        db: Session,
        energy_repo: EnergyRepository,
        company_repo: CompanyRepository,
        aggregator: Optional[ESGAggregator] = None,
    ):
        self.db = db
        self.energy = energy_repo
        self.companies = company_repo
        self.aggregator = aggregator or ESGAggregator()

    def list(self, params: PaginationParams) -> PagedResult[EnergyConsumption]:
        rows, total = self.energy.list_page(params)
        return PagedResult[EnergyConsumption].build(
            [EnergyConsumption.model_validate(r) for r in rows], params.page, params.page_size, total
        )

    def get(self, record_id: int) -> EnergyConsumption:
        row = self.energy.get(record_id)
        if row is None:
            raise NotFoundError("Energy consumption record not found", details=f"id={record_id}")
        return EnergyConsumption.model_validate(row)

    def create(self, data: EnergyConsumptionCreate) -> EnergyConsumption:
        if self.companies.get(data.company_id) is None:
            raise CompanyNotFoundError(data.company_id)

        row = self.energy.create(EnergyConsumptionModel(**data.model_dump()))
        self.db.commit()
        self.db.refresh(row)
        logger.info(
            "Recorded %.2f %s of %s for company %s",
            row.consumption_amount, row.unit, row.energy_type, row.company_id,
        )
        return EnergyConsumption.model_validate(row)

    def statistics(
        self,
        company_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> EnergyStatistics:
        records = self.energy.find(company_id=company_id, start_date=start_date, end_date=end_date)
        return self.aggregator.energy_statistics(records)
