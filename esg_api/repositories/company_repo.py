"""Company repository."""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from esg_api.models.company import CompanyModel
from esg_api.repositories.base import BaseRepository
from esg_api.repositories.query import (
    CompanySortField,
    apply_sort,
    paginate,
    parse_sort_field,
    search_criteria,
)
from esg_api.schemas.common import PaginationParams


class CompanyRepository(BaseRepository[CompanyModel]):
    def __init__(self, db: Session):
        super().__init__(db, CompanyModel)

    def get_by_cnpj(self, cnpj: str) -> Optional[CompanyModel]:
        return self.db.query(self.model).filter(self.model.cnpj == cnpj.strip()).first()

    def list_page(self, params: PaginationParams) -> Tuple[List[CompanyModel], int]:
        m = self.model
        query = self.db.query(m)
        for criterion in search_criteria(params.search_term, m.name, m.cnpj, m.industry, m.city):
            query = query.filter(criterion)

        columns = {
            CompanySortField.NAME: m.name,
            CompanySortField.CNPJ: m.cnpj,
            CompanySortField.INDUSTRY: m.industry,
            CompanySortField.EMPLOYEES: m.employee_count,
        }
        query = apply_sort(
            query,
            columns,
            parse_sort_field(CompanySortField, params.sort_by),
            params.sort_direction,
            default_order=[m.created_at.desc(), m.id.desc()],
        )
        return paginate(query, params.page, params.page_size)

    # ── eager-loaded snapshots for rankings ──────────────────────────

    def all_with_emissions(self) -> List[CompanyModel]:
        return (
            self.db.query(self.model)
            .options(selectinload(self.model.emissions))
            .order_by(self.model.id)
            .all()
        )

    def all_with_energy(self) -> List[CompanyModel]:
        return (
            self.db.query(self.model)
            .options(selectinload(self.model.energy_consumptions))
            .order_by(self.model.id)
            .all()
        )

    def all_with_reports(self) -> List[CompanyModel]:
        return (
            self.db.query(self.model)
            .options(selectinload(self.model.reports))
            .order_by(self.model.id)
            .all()
        )
