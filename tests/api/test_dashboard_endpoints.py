"""Tests for the dashboard endpoints.

Covers statistics, emission trends, company ranking and comparison,
including the 400 envelopes for invalid selectors.
"""

from datetime import date

import pytest

from esg_api.models.carbon_emission import CarbonEmissionModel

BASE = "/api/v1/dashboard"


@pytest.fixture
def second_company_emission(db, second_company):
    db.add(CarbonEmissionModel(company_id=second_company.id, source="Caminhões", emission_amount=40.0,
                               record_date=date(2024, 2, 1), category="Scope 1"))
    db.commit()


class TestStatisticsEndpoint:
    def test_statistics(self, client, sample_emissions, sample_energy, sample_report):
        response = client.get(f"{BASE}/statistics")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["totalCarbonEmissions"] == 25.0
        assert data["totalEnergyConsumption"] == 4000.0
        assert data["averageRenewablePercentage"] == 70.0
        assert data["totalCompanies"] == 1
        assert data["totalReports"] == 1
        assert data["emissionsByCategory"] == {"Scope 1": 10.0, "Scope 2": 12.5, "Scope 3": 2.5}
        assert "lastUpdated" in data

    def test_statistics_window(self, client, sample_emissions):
        response = client.get(f"{BASE}/statistics", params={"startDate": "2024-01-01", "endDate": "2024-01-31"})

        assert response.json()["data"]["totalCarbonEmissions"] == 15.0

    def test_statistics_window_ignores_time_of_day(self, client, sample_emissions):
        response = client.get(
            f"{BASE}/statistics", params={"startDate": "2024-01-01T10:00:00", "endDate": "2024-01-20T08:00:00"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["totalCarbonEmissions"] == 15.0

    def test_bad_date_is_validation_error(self, client):
        response = client.get(f"{BASE}/statistics", params={"startDate": "yesterday"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid data"


class TestEmissionsTrendsEndpoint:
    def test_monthly_buckets(self, client, sample_emissions):
        data = client.get(f"{BASE}/emissions-trends").json()["data"]

        assert [b["period"] for b in data] == ["2023-11", "2024-01", "2024-04"]
        assert data[1]["totalEmissions"] == 15.0
        assert data[1]["averageEmissions"] == 7.5
        assert data[1]["recordCount"] == 2
        assert data[1]["month"] == 1

    def test_yearly_buckets(self, client, sample_emissions):
        data = client.get(f"{BASE}/emissions-trends", params={"period": "YEAR"}).json()["data"]

        assert [(b["year"], b["totalEmissions"]) for b in data] == [(2023, 2.5), (2024, 22.5)]

    def test_invalid_period(self, client):
        response = client.get(f"{BASE}/emissions-trends", params={"period": "week"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid period. Use: month, quarter or year"


class TestCompanyRankingEndpoint:
    def test_emissions_ranking(self, client, sample_emissions, second_company_emission):
        data = client.get(f"{BASE}/company-ranking").json()["data"]

        assert [e["companyName"] for e in data] == ["EcoTech Solutions Ltda", "Verde Logística SA"]
        assert data[0]["totalEmissions"] == 25.0
        assert data[0]["recordCount"] == 4

    def test_esg_score_ranking_key(self, client, sample_report):
        data = client.get(f"{BASE}/company-ranking", params={"metric": "esg_score"}).json()["data"]

        assert data[0]["latestESGScore"] == "A"
        assert data[0]["reportCount"] == 1

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_out_of_range(self, client, limit):
        response = client.get(f"{BASE}/company-ranking", params={"limit": limit})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "The limit must be between 1 and 100"
        assert body["statusCode"] == 400

    def test_invalid_metric(self, client):
        response = client.get(f"{BASE}/company-ranking", params={"metric": "water"})

        assert response.status_code == 400
        assert "Invalid metric" in response.json()["message"]


class TestComparisonEndpoint:
    def test_comparison(self, client, sample_company, second_company, sample_emissions, sample_report):
        response = client.get(
            f"{BASE}/comparison",
            params=[("companyIds", sample_company.id), ("companyIds", second_company.id), ("companyIds", 999)],
        )

        assert response.status_code == 200
        companies = response.json()["data"]["companies"]
        assert [c["companyId"] for c in companies] == [sample_company.id, second_company.id]
        assert companies[0]["latestESGScore"] == "A"
        assert companies[1]["latestESGScore"] is None
        assert companies[1]["emissionsPerEmployee"] == 0.0

    def test_requires_company_ids(self, client):
        response = client.get(f"{BASE}/comparison")

        assert response.status_code == 400
        assert response.json()["message"] == "At least one company must be specified for comparison"

    def test_more_than_ten_companies(self, client):
        response = client.get(f"{BASE}/comparison", params=[("companyIds", i) for i in range(1, 12)])

        assert response.status_code == 400
        assert response.json()["message"] == "A maximum of 10 companies can be compared at once"
