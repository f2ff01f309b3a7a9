"""Company ORM model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from esg_api.database import Base
from esg_api.models.mixins import TimestampMixin


class CompanyModel(TimestampMixin, Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    cnpj = Column(String(20), unique=True, nullable=False, index=True)
    industry = Column(String(100))
    address = Column(String(500))
    city = Column(String(100))
    state = Column(String(50))
    zip_code = Column(String(10))
    contact_email = Column(String(255))
    contact_phone = Column(String(20))
    employee_count = Column(Integer, nullable=False, default=0)

    # Relationships
    emissions = relationship("CarbonEmissionModel", back_populates="company", cascade="all, delete-orphan")
    energy_consumptions = relationship("EnergyConsumptionModel", back_populates="company", cascade="all, delete-orphan")
    reports = relationship("SustainabilityReportModel", back_populates="company", cascade="all, delete-orphan")
    users = relationship("UserModel", back_populates="company")

    def __repr__(self) -> str:
        return f"<Company {self.cnpj} ({self.name})>"
