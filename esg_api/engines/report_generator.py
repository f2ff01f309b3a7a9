"""Builds quarterly sustainability reports from raw emission and energy records."""

from typing import Sequence

from esg_api.domain.scoring import derive_esg_score
from esg_api.engines.aggregation import average_or_zero
from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.company import CompanyModel
from esg_api.models.energy_consumption import EnergyConsumptionModel
from esg_api.models.sustainability_report import SustainabilityReportModel

ENVIRONMENTAL_PLACEHOLDER = "Report generated automatically based on available data."
UNAVAILABLE_PLACEHOLDER = "Data not available for automatic generation."
CHALLENGES_PLACEHOLDER = "Detailed analysis required to identify specific challenges."
FUTURE_GOALS_PLACEHOLDER = "Goal definition requires personalized strategic analysis."


def report_title(company_name: str, year: int, quarter: int) -> str:
    return f"Sustainability Report - {company_name} - {year}Q{quarter}"


class ReportGenerator:
    """Turn one quarter of a company's records into an unsaved report.

    The caller is responsible for selecting records inside the quarter
    window and for persisting the result.
    """

    def generate(
        self,
        company: CompanyModel,
        year: int,
        quarter: int,
        emissions: Sequence[CarbonEmissionModel],
        energy: Sequence[EnergyConsumptionModel],
    ) -> SustainabilityReportModel:
        total_emissions = sum(e.emission_amount for e in emissions)
        total_energy = sum(e.consumption_amount for e in energy)
        renewable = average_or_zero(e.renewable_percentage for e in energy)

        return SustainabilityReportModel(
            company_id=company.id,
            title=report_title(company.name, year, quarter),
            year=year,
            quarter=quarter,
            total_carbon_emissions=total_emissions,
            total_energy_consumption=total_energy,
            renewable_energy_percentage=renewable,
            # No data source for water and waste yet
            water_consumption=0.0,
            waste_generated=0.0,
            waste_recycled=0.0,
            esg_score=derive_esg_score(total_emissions, total_energy, renewable),
            environmental_initiatives=ENVIRONMENTAL_PLACEHOLDER,
            social_initiatives=UNAVAILABLE_PLACEHOLDER,
            governance_initiatives=UNAVAILABLE_PLACEHOLDER,
            challenges=CHALLENGES_PLACEHOLDER,
            future_goals=FUTURE_GOALS_PLACEHOLDER,
        )
