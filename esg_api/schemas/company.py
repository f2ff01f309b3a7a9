"""Company schemas."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from esg_api.schemas.common import CamelModel


class CompanyBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    cnpj: str = Field(..., min_length=1, max_length=20)
    industry: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=500)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=50)
    zip_code: Optional[str] = Field(None, max_length=10)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=20)
    employee_count: int = Field(0, ge=0)


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(CompanyBase):
    pass


class Company(CompanyBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
