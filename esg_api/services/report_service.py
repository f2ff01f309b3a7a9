"""Sustainability reports: manual entry and automatic quarterly generation."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from esg_api.domain.periods import quarter_bounds
from esg_api.engines.report_generator import ReportGenerator
from esg_api.errors import CompanyNotFoundError, DuplicateReportError, NotFoundError
from esg_api.models.sustainability_report import SustainabilityReportModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.repositories.report_repo import ReportRepository
from esg_api.schemas.common import PagedResult, PaginationParams
from esg_api.schemas.report import SustainabilityReport, SustainabilityReportCreate

logger = logging.getLogger(__name__)


class ReportService:
    """Create, list and generate sustainability reports.

    Manual creation enforces one report per (company, year, quarter).
    Generation does not: it always persists a new report and only logs a
    warning when the period is already covered.
    """

    def __init__(
        self,
        db: Session,
        report_repo: ReportRepository,
        company_repo: CompanyRepository,
        emission_repo: EmissionRepository,
        energy_repo: EnergyRepository,
        generator: Optional[ReportGenerator] = None,
    ):
        self.db = db
        self.reports = report_repo
        self.companies = company_repo
        self.emissions = emission_repo
        self.energy = energy_repo
        self.generator = generator or ReportGenerator()

    def list(
        self,
        params: PaginationParams,
        year: Optional[int] = None,
        quarter: Optional[int] = None,
        company_id: Optional[int] = None,
    ) -> PagedResult[SustainabilityReport]:
        rows, total = self.reports.list_page(params, year=year, quarter=quarter, company_id=company_id)
        return PagedResult[SustainabilityReport].build(
            [SustainabilityReport.model_validate(r) for r in rows], params.page, params.page_size, total
        )

    def get(self, report_id: int) -> SustainabilityReport:
        row = self.reports.get(report_id)
        if row is None:
            raise NotFoundError("Sustainability report not found", details=f"id={report_id}")
        return SustainabilityReport.model_validate(row)

    def create(self, data: SustainabilityReportCreate) -> SustainabilityReport:
        if self.companies.get(data.company_id) is None:
            raise CompanyNotFoundError(data.company_id)
        if self.reports.exists_for_period(data.company_id, data.year, data.quarter):
            raise DuplicateReportError(data.company_id, data.year, data.quarter)

        row = self.reports.create(SustainabilityReportModel(**data.model_dump()))
        self.db.commit()
        self.db.refresh(row)
        logger.info("Created report %s for company %s %dQ%d", row.id, row.company_id, row.year, row.quarter)
        return SustainabilityReport.model_validate(row)

    def generate(self, company_id: int, year: int, quarter: int) -> SustainabilityReport:
        """Aggregate one quarter of records into a new scored report."""
        company = self.companies.get(company_id)
        if company is None:
            raise CompanyNotFoundError(company_id)

        start, end = quarter_bounds(year, quarter)
        emissions = self.emissions.find(company_id=company_id, start_date=start, end_date=end)
        energy = self.energy.find(company_id=company_id, start_date=start, end_date=end)

        if self.reports.exists_for_period(company_id, year, quarter):
            logger.warning(
                "generated_report_duplicates_period company_id=%s year=%s quarter=%s",
                company_id, year, quarter,
            )

        row = self.reports.create(self.generator.generate(company, year, quarter, emissions, energy))
        self.db.commit()
        self.db.refresh(row)
        logger.info(
            "Generated report %s for %s %dQ%d: %d emissions, %d energy records, score %s",
            row.id, company.name, year, quarter, len(emissions), len(energy), row.esg_score,
        )
        return SustainabilityReport.model_validate(row)
