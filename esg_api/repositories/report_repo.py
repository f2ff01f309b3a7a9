"""Sustainability report repository."""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, contains_eager

from esg_api.models.company import CompanyModel
from esg_api.models.sustainability_report import SustainabilityReportModel
from esg_api.repositories.base import BaseRepository
from esg_api.repositories.query import (
    ReportSortField,
    apply_sort,
    paginate,
    parse_sort_field,
    search_criteria,
)
from esg_api.schemas.common import PaginationParams


class ReportRepository(BaseRepository[SustainabilityReportModel]):
    def __init__(self, db: Session):
        super().__init__(db, SustainabilityReportModel)

    def list_page(
        self,
        params: PaginationParams,
        *,
        year: Optional[int] = None,
        quarter: Optional[int] = None,
        company_id: Optional[int] = None,
    ) -> Tuple[List[SustainabilityReportModel], int]:
        m = self.model
        query = (
            self.db.query(m)
            .join(m.company)
            .options(contains_eager(m.company))
        )
        criteria = search_criteria(params.search_term, m.title, m.esg_score, CompanyModel.name)
        if year is not None:
            criteria.append(m.year == year)
        if quarter is not None:
            criteria.append(m.quarter == quarter)
        if company_id is not None:
            criteria.append(m.company_id == company_id)
        for criterion in criteria:
            query = query.filter(criterion)

        columns = {
            ReportSortField.TITLE: m.title,
            ReportSortField.YEAR: m.year,
            ReportSortField.QUARTER: m.quarter,
            ReportSortField.ESG_SCORE: m.esg_score,
            ReportSortField.EMISSIONS: m.total_carbon_emissions,
            ReportSortField.ENERGY: m.total_energy_consumption,
            ReportSortField.COMPANY: CompanyModel.name,
        }
        query = apply_sort(
            query,
            columns,
            parse_sort_field(ReportSortField, params.sort_by),
            params.sort_direction,
            default_order=[m.year.desc(), m.quarter.desc(), m.id.desc()],
        )
        return paginate(query, params.page, params.page_size)

    def exists_for_period(self, company_id: int, year: int, quarter: int) -> bool:
        return (
            self.db.query(self.model.id)
            .filter(
                self.model.company_id == company_id,
                self.model.year == year,
                self.model.quarter == quarter,
            )
            .first()
            is not None
        )

    def latest_for_company(self, company_id: int) -> Optional[SustainabilityReportModel]:
        """Most recent report by year, then quarter."""
        return (
            self.db.query(self.model)
            .filter(self.model.company_id == company_id)
            .order_by(self.model.year.desc(), self.model.quarter.desc(), self.model.id.desc())
            .first()
        )
