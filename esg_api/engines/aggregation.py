"""ESG aggregation over snapshots of emission, energy and report records.

Everything here is pure: callers load the records through repositories
and pass them in, so the same code serves the dashboard, the energy
statistics endpoint and report generation.
"""

from collections import defaultdict
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from esg_api.domain.periods import TrendPeriod, period_label, quarter_of
from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.company import CompanyModel
from esg_api.models.energy_consumption import EnergyConsumptionModel
from esg_api.models.sustainability_report import SustainabilityReportModel
from esg_api.schemas.dashboard import (
    ComparisonEntry,
    DateWindow,
    EmissionsRankingEntry,
    EnergyRankingEntry,
    ESGStatistics,
    ScoreRankingEntry,
    TrendBucket,
)
from esg_api.schemas.energy import EnergyStatistics, EnergyTypeTotal, MonthlyTotal

UNCATEGORIZED = "Uncategorized"


def average_or_zero(values: Iterable[Optional[float]]) -> float:
    """Mean of the non-null values, or 0.0 when there are none.

    Examples:
        >>> average_or_zero([10, None, 30])
        20.0
        >>> average_or_zero([None])
        0.0
    """
    present = [v for v in values if v is not None]
    if not present:
        return 0.0
    return sum(present) / len(present)


def per_employee(total: float, employee_count: Optional[int]) -> float:
    if not employee_count or employee_count <= 0:
        return 0.0
    return total / employee_count


def latest_report(reports: Iterable[SustainabilityReportModel]) -> Optional[SustainabilityReportModel]:
    """Most recent report by (year, quarter); ties go to the newest row."""
    best = None
    for r in reports:
        key = (r.year, r.quarter, r.id or 0)
        if best is None or key > (best.year, best.quarter, best.id or 0):
            best = r
    return best


def _sum_by(records, key_attr: str, amount_attr: str) -> Dict[str, float]:
    totals: Dict[str, float] = defaultdict(float)
    for r in records:
        totals[getattr(r, key_attr) or UNCATEGORIZED] += getattr(r, amount_attr)
    return dict(totals)


class ESGAggregator:
    """Dashboard statistics, trends, rankings and comparisons."""

    # ── statistics ──────────────────────────────────────────────────

    def statistics(
        self,
        emissions: Sequence[CarbonEmissionModel],
        energy: Sequence[EnergyConsumptionModel],
        total_companies: int,
        total_reports: int,
    ) -> ESGStatistics:
        return ESGStatistics(
            total_carbon_emissions=sum(e.emission_amount for e in emissions),
            total_energy_consumption=sum(e.consumption_amount for e in energy),
            average_renewable_percentage=average_or_zero(e.renewable_percentage for e in energy),
            total_companies=total_companies,
            total_reports=total_reports,
            last_updated=datetime.now(timezone.utc),
            emissions_by_category=_sum_by(emissions, "category", "emission_amount"),
            energy_by_type=_sum_by(energy, "energy_type", "consumption_amount"),
        )

    def energy_statistics(self, energy: Sequence[EnergyConsumptionModel]) -> EnergyStatistics:
        total = sum(e.consumption_amount for e in energy)

        monthly: Dict[tuple[int, int], float] = defaultdict(float)
        for e in energy:
            monthly[(e.record_date.year, e.record_date.month)] += e.consumption_amount

        return EnergyStatistics(
            total_consumption=total,
            average_consumption=total / len(energy) if energy else 0.0,
            total_cost=sum(e.cost or 0.0 for e in energy),
            average_renewable_percentage=average_or_zero(e.renewable_percentage for e in energy),
            consumption_by_type=[
                EnergyTypeTotal(energy_type=k, total=v)
                for k, v in _sum_by(energy, "energy_type", "consumption_amount").items()
            ],
            monthly_trend=[
                MonthlyTotal(year=y, month=m, total=v)
                for (y, m), v in sorted(monthly.items())
            ],
        )

    # ── trends ──────────────────────────────────────────────────────

    def emissions_trend(
        self, emissions: Sequence[CarbonEmissionModel], period: TrendPeriod
    ) -> List[TrendBucket]:
        """Group emissions into non-overlapping buckets, ascending by time."""
        buckets: Dict[tuple, List[float]] = defaultdict(list)
        for e in emissions:
            buckets[self._bucket_key(e.record_date, period)].append(e.emission_amount)

        trend: List[TrendBucket] = []
        for key in sorted(buckets):
            amounts = buckets[key]
            year, sub = key[0], key[1] if len(key) > 1 else None
            trend.append(TrendBucket(
                year=year,
                month=sub if period is TrendPeriod.MONTH else None,
                quarter=sub if period is TrendPeriod.QUARTER else None,
                period=period_label(period, year, sub),
                total_emissions=sum(amounts),
                average_emissions=sum(amounts) / len(amounts),
                record_count=len(amounts),
            ))
        return trend

    @staticmethod
    def _bucket_key(day: date, period: TrendPeriod) -> tuple:
        if period is TrendPeriod.MONTH:
            return (day.year, day.month)
        if period is TrendPeriod.QUARTER:
            return (day.year, quarter_of(day))
        return (day.year,)

    # ── rankings ────────────────────────────────────────────────────

    def rank_by_emissions(self, companies: Sequence[CompanyModel], limit: int) -> List[EmissionsRankingEntry]:
        """Lowest total emissions first; companies without records are skipped."""
        entries = []
        for c in companies:
            if not c.emissions:
                continue
            total = sum(e.emission_amount for e in c.emissions)
            entries.append(EmissionsRankingEntry(
                company_id=c.id,
                company_name=c.name,
                industry=c.industry,
                total_emissions=total,
                emissions_per_employee=per_employee(total, c.employee_count),
                record_count=len(c.emissions),
            ))
        entries.sort(key=lambda x: x.total_emissions)
        return entries[:limit]

    def rank_by_energy(self, companies: Sequence[CompanyModel], limit: int) -> List[EnergyRankingEntry]:
        """Highest average renewable share first."""
        entries = []
        for c in companies:
            records = c.energy_consumptions
            if not records:
                continue
            total = sum(e.consumption_amount for e in records)
            entries.append(EnergyRankingEntry(
                company_id=c.id,
                company_name=c.name,
                industry=c.industry,
                total_energy_consumption=total,
                average_renewable_percentage=average_or_zero(e.renewable_percentage for e in records),
                energy_per_employee=per_employee(total, c.employee_count),
                record_count=len(records),
            ))
        entries.sort(key=lambda x: x.average_renewable_percentage, reverse=True)
        return entries[:limit]

    def rank_by_esg_score(self, companies: Sequence[CompanyModel], limit: int) -> List[ScoreRankingEntry]:
        """Best latest letter first ("A" sorts before "E")."""
        entries = []
        for c in companies:
            latest = latest_report(c.reports)
            if latest is None or not latest.esg_score:
                continue
            entries.append(ScoreRankingEntry(
                company_id=c.id,
                company_name=c.name,
                industry=c.industry,
                latest_esg_score=latest.esg_score,
                report_count=len(c.reports),
                latest_report_date=max(r.created_at for r in c.reports),
            ))
        entries.sort(key=lambda x: x.latest_esg_score)
        return entries[:limit]

    # ── comparison ──────────────────────────────────────────────────

    def compare_company(
        self,
        company: CompanyModel,
        emissions: Sequence[CarbonEmissionModel],
        energy: Sequence[EnergyConsumptionModel],
        latest: Optional[SustainabilityReportModel],
        window: DateWindow,
    ) -> ComparisonEntry:
        total_emissions = sum(e.emission_amount for e in emissions)
        total_energy = sum(e.consumption_amount for e in energy)
        return ComparisonEntry(
            company_id=company.id,
            company_name=company.name,
            industry=company.industry,
            employee_count=company.employee_count or 0,
            total_emissions=total_emissions,
            total_energy_consumption=total_energy,
            average_renewable_percentage=average_or_zero(e.renewable_percentage for e in energy),
            emissions_per_employee=per_employee(total_emissions, company.employee_count),
            energy_per_employee=per_employee(total_energy, company.employee_count),
            latest_esg_score=latest.esg_score if latest else None,
            period=window,
        )
