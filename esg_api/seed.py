"""Demo data: one company, one emission, one energy record and two users.

Idempotent: nothing is inserted when the demo company's CNPJ already exists.
"""

import logging
from datetime import date
from typing import Dict

from sqlalchemy.orm import Session

from esg_api.domain.roles import UserRole
from esg_api.models.carbon_emission import CarbonEmissionModel
from esg_api.models.company import CompanyModel
from esg_api.models.energy_consumption import EnergyConsumptionModel
from esg_api.models.user import UserModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.repositories.user_repo import UserRepository
from esg_api.security import hash_password

logger = logging.getLogger(__name__)

DEMO_CNPJ = "12.345.678/0001-90"


def seed_demo_data(db: Session) -> Dict[str, int]:
    """Insert the demo records and commit; returns counts of inserted rows."""
    companies = CompanyRepository(db)
    if companies.get_by_cnpj(DEMO_CNPJ):
        logger.info("Demo data already present, skipping seed")
        return {"companies": 0, "emissions": 0, "energy": 0, "users": 0}

    company = companies.create(CompanyModel(
        name="EcoTech Solutions Ltda",
        cnpj=DEMO_CNPJ,
        industry="Tecnologia",
        address="Av. Paulista, 1000",
        city="São Paulo",
        state="SP",
        zip_code="01310-100",
        contact_email="contato@ecotech.com.br",
        contact_phone="(11) 99999-9999",
        employee_count=150,
    ))

    EmissionRepository(db).create(CarbonEmissionModel(
        company_id=company.id,
        source="Energia Elétrica",
        emission_amount=15.5,
        unit="tCO2e",
        record_date=date(2024, 5, 1),
        category="Escopo 2",
        location="São Paulo - SP",
        description="Emissões provenientes do consumo de energia elétrica do escritório principal",
    ))

    EnergyRepository(db).create(EnergyConsumptionModel(
        company_id=company.id,
        energy_type="Elétrica",
        consumption_amount=2500.0,
        unit="kWh",
        record_date=date(2024, 5, 1),
        source="Rede Elétrica",
        cost=1250.0,
        cost_currency="BRL",
        renewable_percentage=35.0,
        description="Consumo mensal do escritório principal",
    ))

    users = UserRepository(db)
    users.create_many([
        UserModel(
            username="admin",
            email="admin@ecotech.com.br",
            password_hash=hash_password("admin123"),
            first_name="Administrador",
            last_name="Sistema",
            role=UserRole.ADMIN.value,
            company_id=company.id,
        ),
        UserModel(
            username="manager",
            email="manager@ecotech.com.br",
            password_hash=hash_password("manager123"),
            first_name="Gerente",
            last_name="ESG",
            role=UserRole.MANAGER.value,
            company_id=company.id,
        ),
    ])

    db.commit()
    logger.info("Seeded demo company %s with two users", company.id)
    return {"companies": 1, "emissions": 1, "energy": 1, "users": 2}
