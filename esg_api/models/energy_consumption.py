"""Energy consumption ORM model."""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from esg_api.database import Base
from esg_api.models.mixins import TimestampMixin


class EnergyConsumptionModel(TimestampMixin, Base):
    __tablename__ = "energy_consumptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    energy_type = Column(String(50), nullable=False, index=True)
    consumption_amount = Column(Float, nullable=False)
    unit = Column(String(20), nullable=False, default="kWh")
    record_date = Column(Date, nullable=False, index=True)
    source = Column(String(100))
    cost = Column(Float)
    cost_currency = Column(String(3), default="BRL")
    renewable_percentage = Column(Float)  # 0-100, None when unknown
    description = Column(String(500))

    company = relationship("CompanyModel", back_populates="energy_consumptions")

    def __repr__(self) -> str:
        return f"<EnergyConsumption company_id={self.company_id} {self.energy_type} {self.consumption_amount}>"

    @property
    def company_name(self) -> str:
        return self.company.name if self.company else ""
