"""Energy consumption schemas, including the per-type and monthly statistics."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from esg_api.schemas.common import CamelModel


class EnergyConsumptionCreate(CamelModel):
    energy_type: str = Field(..., min_length=1, max_length=50)
    consumption_amount: float = Field(..., gt=0)
    unit: str = Field("kWh", max_length=20)
    record_date: date
    source: Optional[str] = Field(None, max_length=100)
    cost: Optional[float] = Field(None, ge=0)
    cost_currency: Optional[str] = Field("BRL", max_length=3)
    renewable_percentage: Optional[float] = Field(None, ge=0, le=100)
    description: Optional[str] = Field(None, max_length=500)
    company_id: int


class EnergyConsumption(CamelModel):
    id: int
    energy_type: str
    consumption_amount: float
    unit: str
    record_date: date
    source: Optional[str] = None
    cost: Optional[float] = None
    cost_currency: Optional[str] = None
    renewable_percentage: Optional[float] = None
    description: Optional[str] = None
    company_id: int
    company_name: str = ""
    created_at: datetime
    updated_at: Optional[datetime] = None


class EnergyTypeTotal(CamelModel):
    energy_type: str
    total: float


class MonthlyTotal(CamelModel):
    year: int
    month: int
    total: float


class EnergyStatistics(CamelModel):
    total_consumption: float = 0.0
    average_consumption: float = 0.0
    total_cost: float = 0.0
    average_renewable_percentage: float = 0.0
    consumption_by_type: List[EnergyTypeTotal] = Field(default_factory=list)
    monthly_trend: List[MonthlyTotal] = Field(default_factory=list)
