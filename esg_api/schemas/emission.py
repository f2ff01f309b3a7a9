"""Carbon emission schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from esg_api.schemas.common import CamelModel


class CarbonEmissionCreate(CamelModel):
    source: str = Field(..., min_length=1, max_length=100)
    emission_amount: float = Field(..., gt=0)
    unit: str = Field("tCO2e", max_length=20)
    record_date: date
    category: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=500)
    company_id: int


class CarbonEmission(CamelModel):
    id: int
    source: str
    emission_amount: float
    unit: str
    record_date: date
    category: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    company_id: int
    company_name: str = ""
    created_at: datetime
    updated_at: Optional[datetime] = None
