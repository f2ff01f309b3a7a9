"""ESG dashboard endpoints: statistics, trends, rankings and comparisons.

All four are read-only and open to anonymous callers. Invalid selectors
(period, metric, limit, company list size) surface as 400 error envelopes
via the exception handlers in ``esg_api.main``.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from esg_api.dependencies import as_date, get_dashboard_service
from esg_api.errors import ESGAPIError
from esg_api.logging_config import get_logger
from esg_api.schemas.common import ApiResponse
from esg_api.schemas.dashboard import ComparisonResult, ESGStatistics, RankingItem, TrendBucket
from esg_api.services.dashboard_service import DashboardService

logger = get_logger(__name__)
router = APIRouter()


@router.get("/statistics", response_model=ApiResponse[ESGStatistics])
def get_statistics(
    company_id: Optional[int] = Query(None, alias="companyId"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    svc: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse[ESGStatistics]:
    """Totals, averages and per-category breakdowns for the filter window."""
    logger.info("statistics_requested", company_id=company_id, start_date=start_date, end_date=end_date)

    stats = svc.statistics(company_id=company_id, start_date=as_date(start_date), end_date=as_date(end_date))

    logger.info(
        "statistics_completed",
        total_emissions=stats.total_carbon_emissions,
        total_energy=stats.total_energy_consumption,
    )
    return ApiResponse.ok(stats, "ESG statistics calculated successfully")


@router.get("/emissions-trends", response_model=ApiResponse[List[TrendBucket]])
def get_emissions_trends(
    company_id: Optional[int] = Query(None, alias="companyId"),
    period: str = Query("month"),
    svc: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse[List[TrendBucket]]:
    """Emission totals grouped by month, quarter or year."""
    logger.info("emissions_trends_requested", company_id=company_id, period=period)

    try:
        trend = svc.emissions_trend(company_id=company_id, period=period)
    except ESGAPIError as e:
        logger.warning("emissions_trends_rejected", period=period, error=e.message)
        raise

    logger.info("emissions_trends_completed", buckets=len(trend))
    return ApiResponse.ok(trend, "Emission trends calculated successfully")


@router.get("/company-ranking", response_model=ApiResponse[List[RankingItem]])
def get_company_ranking(
    metric: str = Query("emissions"),
    limit: int = Query(10),
    svc: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse[List[RankingItem]]:
    """Leaderboard by total emissions, renewable share or latest ESG score."""
    logger.info("company_ranking_requested", metric=metric, limit=limit)

    try:
        ranking = svc.company_ranking(metric=metric, limit=limit)
    except ESGAPIError as e:
        logger.warning("company_ranking_rejected", metric=metric, limit=limit, error=e.message)
        raise

    logger.info("company_ranking_completed", metric=metric, entries=len(ranking))
    return ApiResponse.ok(ranking, "Company ranking calculated successfully")


@router.get("/comparison", response_model=ApiResponse[ComparisonResult])
def get_comparison(
    company_ids: Optional[List[int]] = Query(None, alias="companyIds"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    svc: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse[ComparisonResult]:
    """Side-by-side metrics for up to ten companies."""
    company_ids = company_ids or []
    logger.info("comparison_requested", company_ids=company_ids)

    try:
        result = svc.comparison(company_ids, start_date=as_date(start_date), end_date=as_date(end_date))
    except ESGAPIError as e:
        logger.warning("comparison_rejected", requested=len(company_ids), error=e.message)
        raise

    logger.info("comparison_completed", companies=len(result.companies))
    return ApiResponse.ok(result, "Comparison generated successfully")
