"""Tests for demo data seeding and the management script."""

import pytest

from esg_api.models.company import CompanyModel
from esg_api.models.sustainability_report import SustainabilityReportModel
from esg_api.models.user import UserModel
from esg_api.security import verify_password
from esg_api.seed import DEMO_CNPJ, seed_demo_data
from scripts import manage


class TestSeedDemoData:
    def test_seed_inserts_demo_records(self, db):
        counts = seed_demo_data(db)

        assert counts == {"companies": 1, "emissions": 1, "energy": 1, "users": 2}
        company = db.query(CompanyModel).filter_by(cnpj=DEMO_CNPJ).one()
        assert company.emissions[0].emission_amount == 15.5
        assert company.energy_consumptions[0].renewable_percentage == 35.0

    def test_seed_users_can_log_in(self, db):
        seed_demo_data(db)

        admin = db.query(UserModel).filter_by(username="admin").one()
        manager = db.query(UserModel).filter_by(username="manager").one()
        assert admin.role == "Admin"
        assert manager.role == "Manager"
        assert verify_password("admin123", admin.password_hash)
        assert verify_password("manager123", manager.password_hash)

    def test_seed_is_idempotent(self, db):
        seed_demo_data(db)
        counts = seed_demo_data(db)

        assert counts["companies"] == 0
        assert db.query(CompanyModel).count() == 1
        assert db.query(UserModel).count() == 2


class TestManageScript:
    @pytest.fixture
    def db_url(self, tmp_path, monkeypatch):
        url = f"sqlite:///{tmp_path / 'manage.db'}"
        monkeypatch.setenv("DATABASE_URL", url)
        return url

    def test_seed_then_generate(self, db_url):
        from sqlalchemy import create_engine
        from sqlalchemy.orm import sessionmaker

        assert manage.main(["seed"]) == 0
        assert manage.main(["generate-reports", "--year", "2024", "--quarter", "2"]) == 0

        engine = create_engine(db_url)
        session = sessionmaker(bind=engine)()
        try:
            report = session.query(SustainabilityReportModel).one()
            assert report.total_carbon_emissions == 15.5
            assert report.total_energy_consumption == 2500.0
            # emissions 15.5, energy 2500, renewable 35 → 100
            assert report.esg_score == "A"
        finally:
            session.close()
            engine.dispose()

    def test_generate_for_unknown_company_fails(self, db_url):
        assert manage.main(["generate-reports", "--year", "2024", "--quarter", "1", "--company-id", "42"]) == 1

    def test_quarter_must_be_valid(self, db_url):
        with pytest.raises(SystemExit):
            manage.main(["generate-reports", "--year", "2024", "--quarter", "5"])
