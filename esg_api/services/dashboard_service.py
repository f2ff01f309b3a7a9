"""Dashboard queries: statistics, emission trends, rankings and comparisons."""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence

from esg_api.domain.periods import TrendPeriod
from esg_api.domain.ranking import MAX_RANKING_LIMIT, RankingMetric, validate_limit
from esg_api.engines.aggregation import ESGAggregator
from esg_api.errors import InvalidArgumentError
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.repositories.report_repo import ReportRepository
from esg_api.schemas.dashboard import (
    ComparisonResult,
    DateWindow,
    ESGStatistics,
    RankingItem,
    TrendBucket,
)

logger = logging.getLogger(__name__)

MAX_COMPARISON_COMPANIES = 10


class DashboardService:
    def __init__(
        self,
        company_repo: CompanyRepository,
        emission_repo: EmissionRepository,
        energy_repo: EnergyRepository,
        report_repo: ReportRepository,
        aggregator: Optional[ESGAggregator] = None,
        max_ranking_limit: int = MAX_RANKING_LIMIT,
        max_comparison_companies: int = MAX_COMPARISON_COMPANIES,
    ):
        self.companies = company_repo
        self.emissions = emission_repo
        self.energy = energy_repo
        self.reports = report_repo
        self.aggregator = aggregator or ESGAggregator()
        self.max_ranking_limit = max_ranking_limit
        self.max_comparison_companies = max_comparison_companies

    def statistics(
        self,
        company_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ESGStatistics:
        emissions = self.emissions.find(company_id=company_id, start_date=start_date, end_date=end_date)
        energy = self.energy.find(company_id=company_id, start_date=start_date, end_date=end_date)
        total_companies = 1 if company_id is not None else self.companies.count()
        # Report total is deliberately unfiltered
        return self.aggregator.statistics(emissions, energy, total_companies, self.reports.count())

    def emissions_trend(self, company_id: Optional[int] = None, period: Optional[str] = None) -> List[TrendBucket]:
        selected = TrendPeriod.parse(period)
        emissions = self.emissions.find(company_id=company_id)
        return self.aggregator.emissions_trend(emissions, selected)

    def company_ranking(self, metric: Optional[str] = None, limit: int = 10) -> List[RankingItem]:
        # Limit is checked before the metric so limit=0 always fails the same way
        validate_limit(limit, self.max_ranking_limit)
        selected = RankingMetric.parse(metric)

        if selected is RankingMetric.EMISSIONS:
            return self.aggregator.rank_by_emissions(self.companies.all_with_emissions(), limit)
        if selected is RankingMetric.ENERGY:
            return self.aggregator.rank_by_energy(self.companies.all_with_energy(), limit)
        return self.aggregator.rank_by_esg_score(self.companies.all_with_reports(), limit)

    def comparison(
        self,
        company_ids: Sequence[int],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ComparisonResult:
        """Side-by-side totals; ids with no matching company are skipped."""
        if not company_ids:
            raise InvalidArgumentError("At least one company must be specified for comparison")
        if len(company_ids) > self.max_comparison_companies:
            raise InvalidArgumentError(
                f"A maximum of {self.max_comparison_companies} companies can be compared at once",
                details=f"received={len(company_ids)}",
            )

        window = DateWindow(start_date=start_date, end_date=end_date)
        entries = []
        for company_id in company_ids:
            company = self.companies.get(company_id)
            if company is None:
                logger.info("Skipping unknown company %s in comparison", company_id)
                continue
            entries.append(self.aggregator.compare_company(
                company,
                self.emissions.find(company_id=company_id, start_date=start_date, end_date=end_date),
                self.energy.find(company_id=company_id, start_date=start_date, end_date=end_date),
                self.reports.latest_for_company(company_id),
                window,
            ))

        return ComparisonResult(
            companies=entries,
            comparison_date=datetime.now(timezone.utc),
            period=window,
        )
