"""Unit tests for automatic report construction."""

from datetime import date

from esg_api.engines.report_generator import (
    CHALLENGES_PLACEHOLDER,
    ENVIRONMENTAL_PLACEHOLDER,
    FUTURE_GOALS_PLACEHOLDER,
    UNAVAILABLE_PLACEHOLDER,
    ReportGenerator,
    report_title,
)
from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.company import CompanyModel
from esg_api.models.energy_consumption import EnergyConsumptionModel


def _company():
    return CompanyModel(id=7, name="EcoTech Solutions Ltda", cnpj="x", employee_count=150)


class TestReportGenerator:
    def test_title_format(self):
        assert report_title("EcoTech", 2024, 2) == "Sustainability Report - EcoTech - 2024Q2"

    def test_totals_and_score(self):
        emissions = [
            CarbonEmissionModel(source="a", emission_amount=10.0, record_date=date(2024, 4, 1)),
            CarbonEmissionModel(source="b", emission_amount=5.0, record_date=date(2024, 5, 1)),
        ]
        energy = [
            EnergyConsumptionModel(energy_type="Elétrica", consumption_amount=1500.0,
                                   record_date=date(2024, 4, 1), renewable_percentage=40.0),
            EnergyConsumptionModel(energy_type="Solar", consumption_amount=500.0,
                                   record_date=date(2024, 6, 1), renewable_percentage=60.0),
            EnergyConsumptionModel(energy_type="Gás", consumption_amount=0.5,
                                   record_date=date(2024, 6, 2), renewable_percentage=None),
        ]

        report = ReportGenerator().generate(_company(), 2024, 2, emissions, energy)

        assert report.company_id == 7
        assert report.title == "Sustainability Report - EcoTech Solutions Ltda - 2024Q2"
        assert report.total_carbon_emissions == 15.0
        assert report.total_energy_consumption == 2000.5
        assert report.renewable_energy_percentage == 50.0
        assert report.esg_score == "A"
        assert report.water_consumption == 0.0
        assert report.waste_generated == 0.0
        assert report.waste_recycled == 0.0

    def test_placeholder_narratives(self):
        report = ReportGenerator().generate(_company(), 2024, 1, [], [])

        assert report.environmental_initiatives == ENVIRONMENTAL_PLACEHOLDER
        assert report.social_initiatives == UNAVAILABLE_PLACEHOLDER
        assert report.governance_initiatives == UNAVAILABLE_PLACEHOLDER
        assert report.challenges == CHALLENGES_PLACEHOLDER
        assert report.future_goals == FUTURE_GOALS_PLACEHOLDER

    def test_empty_quarter_scores_from_zero_renewable(self):
        """No energy data: renewable 0.0 triggers the low-renewable penalty (90 → A)."""
        report = ReportGenerator().generate(_company(), 2024, 1, [], [])

        assert report.renewable_energy_percentage == 0.0
        assert report.esg_score == "A"

    def test_heavy_quarter_scores_e(self):
        emissions = [CarbonEmissionModel(source="a", emission_amount=60.0, record_date=date(2024, 1, 1))]
        energy = [EnergyConsumptionModel(energy_type="Gás", consumption_amount=12000.0,
                                         record_date=date(2024, 1, 1), renewable_percentage=10.0)]

        report = ReportGenerator().generate(_company(), 2024, 1, emissions, energy)

        assert report.esg_score == "E"
