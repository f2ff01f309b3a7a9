"""Explicit filter → sort → paginate pipeline for list endpoints.

Each entity declares a sort-field enum and a mapping from enum member to
column; requested ``sortBy`` values are parsed against the enum, never
resolved by attribute name.
"""

from datetime import date
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import or_
from sqlalchemy.orm import Query

from esg_api.schemas.common import SortDirection

E = TypeVar("E", bound=Enum)


class CompanySortField(str, Enum):
    NAME = "name"
    CNPJ = "cnpj"
    INDUSTRY = "industry"
    EMPLOYEES = "employees"


class EmissionSortField(str, Enum):
    SOURCE = "source"
    AMOUNT = "amount"
    DATE = "date"
    COMPANY = "company"


class EnergySortField(str, Enum):
    ENERGY_TYPE = "energytype"
    AMOUNT = "amount"
    DATE = "date"
    COST = "cost"
    RENEWABLE = "renewable"
    COMPANY = "company"


class ReportSortField(str, Enum):
    TITLE = "title"
    YEAR = "year"
    QUARTER = "quarter"
    ESG_SCORE = "esgscore"
    EMISSIONS = "emissions"
    ENERGY = "energy"
    COMPANY = "company"


def parse_sort_field(enum_cls: Type[E], value: Optional[str]) -> Optional[E]:
    """Case-insensitive lookup; unknown or empty values return None."""
    if not value:
        return None
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        return None


def search_criteria(term: Optional[str], *columns) -> List[Any]:
    if not term or not term.strip():
        return []
    pattern = f"%{term.strip()}%"
    return [or_(*(col.ilike(pattern) for col in columns))]


def date_range_criteria(column, start: Optional[date], end: Optional[date]) -> List[Any]:
    """Inclusive bounds on a Date column."""
    criteria = []
    if start is not None:
        criteria.append(column >= start)
    if end is not None:
        criteria.append(column <= end)
    return criteria


def apply_sort(
    query: Query,
    columns: Mapping[E, Any],
    field: Optional[E],
    direction: SortDirection,
    default_order: Sequence[Any],
) -> Query:
    if field is None or field not in columns:
        return query.order_by(*default_order)
    column = columns[field]
    ordered = column.desc() if direction == SortDirection.DESC else column.asc()
    return query.order_by(ordered)


def paginate(query: Query, page: int, page_size: int) -> Tuple[list, int]:
    """Return (rows for the page, total row count before paging)."""
    total = query.order_by(None).count()
    rows = query.offset((page - 1) * page_size).limit(page_size).all()
    return rows, total
