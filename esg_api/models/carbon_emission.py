"""Carbon emission ORM model."""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from esg_api.database import Base
from esg_api.models.mixins import TimestampMixin


class CarbonEmissionModel(TimestampMixin, Base):
    __tablename__ = "carbon_emissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    source = Column(String(100), nullable=False)
    emission_amount = Column(Float, nullable=False)
    unit = Column(String(20), nullable=False, default="tCO2e")
    record_date = Column(Date, nullable=False, index=True)
    category = Column(String(50), index=True)  # "Scope 1", "Scope 2", ...
    location = Column(String(200))
    description = Column(String(500))

    company = relationship("CompanyModel", back_populates="emissions")

    def __repr__(self) -> str:
        return f"<CarbonEmission company_id={self.company_id} {self.emission_amount} {self.unit}>"

    @property
    def company_name(self) -> str:
        return self.company.name if self.company else ""
