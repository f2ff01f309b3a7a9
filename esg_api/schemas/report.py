"""Sustainability report schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from esg_api.domain.scoring import ESGScore
from esg_api.schemas.common import CamelModel


class SustainabilityReportCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    year: int = Field(..., ge=2000, le=2100)
    quarter: int = Field(..., ge=1, le=4)
    total_carbon_emissions: float = Field(0.0, ge=0)
    total_energy_consumption: float = Field(0.0, ge=0)
    renewable_energy_percentage: float = Field(0.0, ge=0, le=100)
    water_consumption: float = Field(0.0, ge=0)
    waste_generated: float = Field(0.0, ge=0)
    waste_recycled: float = Field(0.0, ge=0)
    esg_score: str = ""
    environmental_initiatives: str = ""
    social_initiatives: str = ""
    governance_initiatives: str = ""
    challenges: str = ""
    future_goals: str = ""
    company_id: int

    @field_validator("esg_score")
    @classmethod
    def validate_esg_score(cls, v: str) -> str:
        """Accept an empty score or one of the letters A-E."""
        v = v.strip().upper()
        if v and v not in {s.value for s in ESGScore}:
            raise ValueError("ESG score must be one of A, B, C, D, E")
        return v


class SustainabilityReport(CamelModel):
    id: int
    title: str
    year: int
    quarter: int
    total_carbon_emissions: float
    total_energy_consumption: float
    renewable_energy_percentage: float
    water_consumption: float
    waste_generated: float
    waste_recycled: float
    esg_score: Optional[str] = None
    environmental_initiatives: Optional[str] = None
    social_initiatives: Optional[str] = None
    governance_initiatives: Optional[str] = None
    challenges: Optional[str] = None
    future_goals: Optional[str] = None
    company_id: int
    company_name: str = ""
    created_at: datetime
    updated_at: Optional[datetime] = None
