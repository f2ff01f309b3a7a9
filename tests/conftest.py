"""Shared test fixtures.

Every test gets a fresh in-memory SQLite database so tests are fully isolated.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from esg_api.config import Settings
from esg_api.database import Base, get_db
from esg_api.domain.roles import UserRole
from esg_api.main import app
from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.company import CompanyModel
from esg_api.models.energy_consumption import EnergyConsumptionModel
from esg_api.models.sustainability_report import SustainabilityReportModel
from esg_api.models.user import UserModel
from esg_api.security import hash_password


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    session = sessionmaker(bind=db_engine)()
    yield session
    session.close()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite:///:memory:",
        jwt_secret_key="test-secret-key-that-is-long-enough-for-hs256",
    )


# ── HTTP client ──────────────────────────────────────────────────────────

@pytest.fixture()
def client(db_engine):
    """TestClient whose requests share the test database."""
    TestingSessionLocal = sessionmaker(bind=db_engine)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login(client: TestClient, username: str, password: str) -> dict:
    response = client.post("/api/v1/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


@pytest.fixture()
def admin_headers(client, admin_user) -> dict:
    return _login(client, "admin", "admin123")


@pytest.fixture()
def manager_headers(client, manager_user) -> dict:
    return _login(client, "manager", "manager123")


@pytest.fixture()
def user_headers(client, plain_user) -> dict:
    return _login(client, "analyst", "analyst123")


# ── Convenience fixtures ─────────────────────────────────────────────────

@pytest.fixture()
def sample_company(db: Session) -> CompanyModel:
    company = CompanyModel(
        name="EcoTech Solutions Ltda",
        cnpj="12.345.678/0001-90",
        industry="Tecnologia",
        city="São Paulo",
        state="SP",
        employee_count=150,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@pytest.fixture()
def second_company(db: Session) -> CompanyModel:
    company = CompanyModel(
        name="Verde Logística SA",
        cnpj="98.765.432/0001-10",
        industry="Logística",
        employee_count=0,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def _user(db: Session, username: str, password: str, role: UserRole, company_id=None) -> UserModel:
    user = UserModel(
        username=username,
        email=f"{username}@ecotech.com.br",
        password_hash=hash_password(password),
        first_name=username.title(),
        last_name="Test",
        role=role.value,
        company_id=company_id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def admin_user(db: Session, sample_company) -> UserModel:
    return _user(db, "admin", "admin123", UserRole.ADMIN, sample_company.id)


@pytest.fixture()
def manager_user(db: Session, sample_company) -> UserModel:
    return _user(db, "manager", "manager123", UserRole.MANAGER, sample_company.id)


@pytest.fixture()
def plain_user(db: Session) -> UserModel:
    return _user(db, "analyst", "analyst123", UserRole.USER)


@pytest.fixture()
def sample_emissions(db: Session, sample_company) -> list[CarbonEmissionModel]:
    """Four emissions across Q1 and Q2 2024 and one in 2023."""
    rows = [
        CarbonEmissionModel(company_id=sample_company.id, source="Frota", emission_amount=10.0,
                            record_date=date(2024, 1, 15), category="Scope 1"),
        CarbonEmissionModel(company_id=sample_company.id, source="Energia Elétrica", emission_amount=5.0,
                            record_date=date(2024, 1, 20), category="Scope 2"),
        CarbonEmissionModel(company_id=sample_company.id, source="Energia Elétrica", emission_amount=7.5,
                            record_date=date(2024, 4, 1), category="Scope 2"),
        CarbonEmissionModel(company_id=sample_company.id, source="Viagens", emission_amount=2.5,
                            record_date=date(2023, 11, 30), category="Scope 3"),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture()
def sample_energy(db: Session, sample_company) -> list[EnergyConsumptionModel]:
    rows = [
        EnergyConsumptionModel(company_id=sample_company.id, energy_type="Elétrica", consumption_amount=2500.0,
                               record_date=date(2024, 1, 10), cost=1250.0, renewable_percentage=40.0),
        EnergyConsumptionModel(company_id=sample_company.id, energy_type="Solar", consumption_amount=500.0,
                               record_date=date(2024, 2, 10), cost=None, renewable_percentage=100.0),
        EnergyConsumptionModel(company_id=sample_company.id, energy_type="Gás", consumption_amount=1000.0,
                               record_date=date(2024, 2, 28), cost=300.0, renewable_percentage=None),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture()
def sample_report(db: Session, sample_company) -> SustainabilityReportModel:
    report = SustainabilityReportModel(
        company_id=sample_company.id,
        title="Q1 2024",
        year=2024,
        quarter=1,
        total_carbon_emissions=15.0,
        total_energy_consumption=4000.0,
        renewable_energy_percentage=70.0,
        esg_score="A",
    )
    db.add(report)
    db.commit()
    db.refresh(report)
    return report
