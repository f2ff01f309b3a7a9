"""Carbon emission repository."""

from typing import List, Tuple

from sqlalchemy.orm import Session, contains_eager

from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.company import CompanyModel
from esg_api.repositories.base import DatedRecordRepository
from esg_api.repositories.query import (
    EmissionSortField,
    apply_sort,
    date_range_criteria,
    paginate,
    parse_sort_field,
    search_criteria,
)
from esg_api.schemas.common import PaginationParams


class EmissionRepository(DatedRecordRepository[CarbonEmissionModel]):
    def __init__(self, db: Session):
        super().__init__(db, CarbonEmissionModel)

    def list_page(self, params: PaginationParams) -> Tuple[List[CarbonEmissionModel], int]:
        m = self.model
        query = (
            self.db.query(m)
            .join(m.company)
            .options(contains_eager(m.company))
        )
        criteria = search_criteria(
            params.search_term, m.source, m.category, m.location, CompanyModel.name
        )
        criteria += date_range_criteria(m.record_date, params.start_date, params.end_date)
        for criterion in criteria:
            query = query.filter(criterion)

        columns = {
            EmissionSortField.SOURCE: m.source,
            EmissionSortField.AMOUNT: m.emission_amount,
            EmissionSortField.DATE: m.record_date,
            EmissionSortField.COMPANY: CompanyModel.name,
        }
        query = apply_sort(
            query,
            columns,
            parse_sort_field(EmissionSortField, params.sort_by),
            params.sort_direction,
            default_order=[m.created_at.desc(), m.id.desc()],
        )
        return paginate(query, params.page, params.page_size)
