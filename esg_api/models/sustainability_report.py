"""Sustainability report ORM model.

One report per (company, year, quarter) is enforced by the report service
on manual creation only; automatic generation may add a second row, so
there is no unique constraint here.
"""

from sqlalchemy import Column, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from esg_api.database import Base
from esg_api.models.mixins import TimestampMixin


class SustainabilityReportModel(TimestampMixin, Base):
    __tablename__ = "sustainability_reports"
    __table_args__ = (
        Index("ix_sustainability_reports_year_quarter", "year", "quarter"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    year = Column(Integer, nullable=False)
    quarter = Column(Integer, nullable=False)

    total_carbon_emissions = Column(Float, nullable=False, default=0.0)
    total_energy_consumption = Column(Float, nullable=False, default=0.0)
    renewable_energy_percentage = Column(Float, nullable=False, default=0.0)
    water_consumption = Column(Float, nullable=False, default=0.0)
    waste_generated = Column(Float, nullable=False, default=0.0)
    waste_recycled = Column(Float, nullable=False, default=0.0)

    esg_score = Column(String(10), index=True)  # "A".."E"

    environmental_initiatives = Column(Text)
    social_initiatives = Column(Text)
    governance_initiatives = Column(Text)
    challenges = Column(Text)
    future_goals = Column(Text)

    company = relationship("CompanyModel", back_populates="reports")

    def __repr__(self) -> str:
        return f"<SustainabilityReport company_id={self.company_id} {self.year}Q{self.quarter} score={self.esg_score}>"

    @property
    def company_name(self) -> str:
        return self.company.name if self.company else ""
