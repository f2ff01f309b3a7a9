"""Energy consumption repository."""

from typing import List, Tuple

from sqlalchemy.orm import Session, contains_eager

from esg_api.models.company import CompanyModel
from esg_api.models.energy_consumption import EnergyConsumptionModel
from esg_api.repositories.base import DatedRecordRepository
from esg_api.repositories.query import (
    EnergySortField,
    apply_sort,
    date_range_criteria,
    paginate,
    parse_sort_field,
    search_criteria,
)
from esg_api.schemas.common import PaginationParams


class EnergyRepository(DatedRecordRepository[EnergyConsumptionModel]):
    def __init__(self, db: Session):
        super().__init__(db, EnergyConsumptionModel)

    def list_page(self, params: PaginationParams) -> Tuple[List[EnergyConsumptionModel], int]:
        m = self.model
        query = (
            self.db.query(m)
            .join(m.company)
            .options(contains_eager(m.company))
        )
        criteria = search_criteria(params.search_term, m.energy_type, m.source, CompanyModel.name)
        criteria += date_range_criteria(m.record_date, params.start_date, params.end_date)
        for criterion in criteria:
            query = query.filter(criterion)

        columns = {
            EnergySortField.ENERGY_TYPE: m.energy_type,
            EnergySortField.AMOUNT: m.consumption_amount,
            EnergySortField.DATE: m.record_date,
            EnergySortField.COST: m.cost,
            EnergySortField.RENEWABLE: m.renewable_percentage,
            EnergySortField.COMPANY: CompanyModel.name,
        }
        query = apply_sort(
            query,
            columns,
            parse_sort_field(EnergySortField, params.sort_by),
            params.sort_direction,
            default_order=[m.created_at.desc(), m.id.desc()],
        )
        return paginate(query, params.page, params.page_size)
