"""Unit tests for company, emission and energy record services."""

from datetime import date

import pytest

from esg_api.errors import CompanyNotFoundError, ConflictError, NotFoundError
from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.user import UserModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.schemas.common import PaginationParams
from esg_api.schemas.company import CompanyCreate, CompanyUpdate
from esg_api.schemas.emission import CarbonEmissionCreate
from esg_api.schemas.energy import EnergyConsumptionCreate
from esg_api.services.company_service import CompanyService
from esg_api.services.emission_service import EmissionService
from esg_api.services.energy_service import EnergyService


@pytest.fixture
def company_svc(db):
    return CompanyService(db=db, company_repo=CompanyRepository(db))


@pytest.fixture
def emission_svc(db):
    return EmissionService(db=db, emission_repo=EmissionRepository(db), company_repo=CompanyRepository(db))


@pytest.fixture
def energy_svc(db):
    return EnergyService(db=db, energy_repo=EnergyRepository(db), company_repo=CompanyRepository(db))


class TestCompanyService:
    def test_create_and_get(self, company_svc):
        created = company_svc.create(CompanyCreate(
            name="Solaris Energia", cnpj="11.111.111/0001-11", employee_count=20,
            contact_email="contato@solaris.com.br",
        ))

        fetched = company_svc.get(created.id)
        assert fetched.name == "Solaris Energia"
        assert fetched.employee_count == 20
        assert fetched.created_at is not None

    def test_duplicate_cnpj(self, company_svc, sample_company):
        with pytest.raises(ConflictError, match="CNPJ"):
            company_svc.create(CompanyCreate(name="Copy", cnpj=sample_company.cnpj))

    def test_update(self, company_svc, sample_company):
        updated = company_svc.update(sample_company.id, CompanyUpdate(
            name="EcoTech Renovada", cnpj=sample_company.cnpj, employee_count=200,
        ))

        assert updated.name == "EcoTech Renovada"
        assert updated.employee_count == 200

    def test_update_to_taken_cnpj(self, company_svc, sample_company, second_company):
        with pytest.raises(ConflictError):
            company_svc.update(sample_company.id, CompanyUpdate(name="X", cnpj=second_company.cnpj))

    def test_get_missing(self, company_svc):
        with pytest.raises(NotFoundError) as exc_info:
            company_svc.get(404)
        assert exc_info.value.status_code == 404

    def test_delete_cascades_records_and_detaches_users(
        self, db, company_svc, sample_company, sample_emissions, sample_energy, sample_report, admin_user
    ):
        company_svc.delete(sample_company.id)
        db.expire_all()

        assert db.query(CarbonEmissionModel).count() == 0
        user = db.query(UserModel).filter_by(username="admin").one()
        assert user.company_id is None

    def test_delete_missing(self, company_svc):
        with pytest.raises(NotFoundError):
            company_svc.delete(404)

    def test_list_default_page(self, company_svc, sample_company, second_company):
        page = company_svc.list(PaginationParams())

        assert page.total_records == 2
        assert page.total_pages == 1
        assert not page.has_next_page


class TestEmissionService:
    def test_create(self, emission_svc, sample_company):
        created = emission_svc.create(CarbonEmissionCreate(
            source="Frota", emission_amount=3.2, record_date=date(2024, 3, 3),
            category="Scope 1", company_id=sample_company.id,
        ))

        assert created.id is not None
        assert created.unit == "tCO2e"
        assert created.company_name == "EcoTech Solutions Ltda"

    def test_create_for_missing_company(self, emission_svc):
        with pytest.raises(CompanyNotFoundError) as exc_info:
            emission_svc.create(CarbonEmissionCreate(
                source="Frota", emission_amount=1.0, record_date=date(2024, 1, 1), company_id=999,
            ))
        assert exc_info.value.status_code == 400

    def test_get_missing(self, emission_svc):
        with pytest.raises(NotFoundError, match="Carbon emission not found"):
            emission_svc.get(999)

    def test_list_search_and_dates(self, emission_svc, sample_emissions):
        page = emission_svc.list(PaginationParams(search_term="energia", start_date=date(2024, 1, 1)))

        assert page.total_records == 2
        assert all(e.source == "Energia Elétrica" for e in page.data)


class TestEnergyService:
    def test_create_defaults(self, energy_svc, sample_company):
        created = energy_svc.create(EnergyConsumptionCreate(
            energy_type="Solar", consumption_amount=120.0, record_date=date(2024, 3, 1),
            company_id=sample_company.id,
        ))

        assert created.unit == "kWh"
        assert created.cost_currency == "BRL"
        assert created.renewable_percentage is None

    def test_create_for_missing_company(self, energy_svc):
        with pytest.raises(CompanyNotFoundError):
            energy_svc.create(EnergyConsumptionCreate(
                energy_type="Solar", consumption_amount=1.0, record_date=date(2024, 3, 1), company_id=999,
            ))

    def test_get_missing(self, energy_svc):
        with pytest.raises(NotFoundError, match="Energy consumption record not found"):
            energy_svc.get(999)

    def test_statistics(self, energy_svc, sample_company, sample_energy):
        stats = energy_svc.statistics(company_id=sample_company.id)

        assert stats.total_consumption == 4000.0
        assert stats.total_cost == 1550.0
        assert stats.average_renewable_percentage == 70.0
        assert [(m.year, m.month, m.total) for m in stats.monthly_trend] == [(2024, 1, 2500.0), (2024, 2, 1500.0)]

    def test_statistics_window(self, energy_svc, sample_energy):
        stats = energy_svc.statistics(start_date=date(2024, 2, 1), end_date=date(2024, 2, 28))

        assert stats.total_consumption == 1500.0
        assert stats.average_consumption == 750.0
