"""Dashboard schemas: statistics, emission trends, rankings and comparisons."""

from datetime import date, datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from esg_api.schemas.common import CamelModel


class ESGStatistics(CamelModel):
    total_carbon_emissions: float = 0.0
    total_energy_consumption: float = 0.0
    average_renewable_percentage: float = 0.0
    total_companies: int = 0
    total_reports: int = 0
    last_updated: datetime
    emissions_by_category: Dict[str, float] = Field(default_factory=dict)
    energy_by_type: Dict[str, float] = Field(default_factory=dict)


class TrendBucket(CamelModel):
    """One period of the emissions trend.

    ``month`` is set for monthly buckets, ``quarter`` for quarterly ones;
    yearly buckets carry only ``year``.
    """

    year: int
    month: Optional[int] = None
    quarter: Optional[int] = None
    period: str
    total_emissions: float
    average_emissions: float
    record_count: int


class RankingEntry(CamelModel):
    company_id: int
    company_name: str
    industry: Optional[str] = None


class EmissionsRankingEntry(RankingEntry):
    total_emissions: float
    emissions_per_employee: float
    record_count: int


class EnergyRankingEntry(RankingEntry):
    total_energy_consumption: float
    average_renewable_percentage: float
    energy_per_employee: float
    record_count: int


class ScoreRankingEntry(RankingEntry):
    latest_esg_score: str = Field(..., alias="latestESGScore")
    report_count: int
    latest_report_date: Optional[datetime] = None


RankingItem = Union[EmissionsRankingEntry, EnergyRankingEntry, ScoreRankingEntry]


class DateWindow(CamelModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ComparisonEntry(CamelModel):
    company_id: int
    company_name: str
    industry: Optional[str] = None
    employee_count: int
    total_emissions: float
    total_energy_consumption: float
    average_renewable_percentage: float
    emissions_per_employee: float
    energy_per_employee: float
    latest_esg_score: Optional[str] = Field(None, alias="latestESGScore")
    period: DateWindow


class ComparisonResult(CamelModel):
    companies: List[ComparisonEntry] = Field(default_factory=list)
    comparison_date: datetime
    period: DateWindow
