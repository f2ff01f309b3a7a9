"""Core business-logic engines."""

from esg_api.engines.aggregation import ESGAggregator
from esg_api.engines.report_generator import ReportGenerator

__all__ = [
    "ESGAggregator",
    "ReportGenerator",
]
