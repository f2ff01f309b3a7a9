"""Response envelopes, paging and the camelCase base model.

Every schema that crosses the HTTP boundary derives from ``CamelModel`` so
JSON keys are camelCase while Python attributes stay snake_case.
"""

import math
from datetime import date, datetime, timezone
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PaginationParams(CamelModel):
    """Paging, search and date-range filters shared by all list endpoints."""

    page: int = 1
    page_size: int = 10
    search_term: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    sort_by: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC

    def normalized(self, default_page_size: int = 10, max_page_size: int = 100) -> "PaginationParams":
        """Clamp page to >= 1 and page size to [1, max_page_size]."""
        page_size = self.page_size if self.page_size > 0 else default_page_size
        return self.model_copy(update={
            "page": max(self.page, 1),
            "page_size": min(page_size, max_page_size),
        })

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PagedResult(CamelModel, Generic[T]):
    data: List[T] = Field(default_factory=list)
    current_page: int = 1
    page_size: int = 10
    total_pages: int = 0
    total_records: int = 0
    has_previous_page: bool = False
    has_next_page: bool = False

    @classmethod
    def build(cls, data: List[T], page: int, page_size: int, total_records: int) -> "PagedResult[T]":
        total_pages = math.ceil(total_records / page_size) if page_size else 0
        return cls(
            data=data,
            current_page=page,
            page_size=page_size,
            total_pages=total_pages,
            total_records=total_records,
            has_previous_page=page > 1,
            has_next_page=page < total_pages,
        )


class ApiResponse(CamelModel, Generic[T]):
    """Envelope for successful responses and request validation failures."""

    success: bool = True
    message: str = ""
    data: Optional[T] = None
    errors: List[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=_utcnow)

    @classmethod
    def ok(cls, data: T, message: str = "") -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str, errors: Optional[List[str]] = None) -> "ApiResponse[T]":
        return cls(success=False, message=message, errors=errors or [])


class ErrorResponse(CamelModel):
    """Envelope for domain errors, auth failures and unhandled exceptions."""

    message: str
    details: Optional[str] = None
    status_code: int
    timestamp: datetime = Field(default_factory=_utcnow)
    trace_id: Optional[str] = None
