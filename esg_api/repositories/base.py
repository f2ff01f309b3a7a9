"""Generic base repository with reusable CRUD operations."""

from datetime import date
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from esg_api.database import Base
from esg_api.repositories.query import date_range_criteria

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Thin data-access layer over SQLAlchemy.

    Subclasses add domain-specific queries.
    Repositories only modify the session (add/delete/flush) - the caller
    controls when to commit or rollback.
    """

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    # ── reads ────────────────────────────────────────────────────────

    def get(self, id: int) -> Optional[T]:
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self, *, skip: int = 0, limit: int = 100) -> List[T]:
        return self.db.query(self.model).order_by(self.model.id).offset(skip).limit(limit).all()

    def count(self) -> int:
        return self.db.query(self.model).count()

    # ── writes ───────────────────────────────────────────────────────

    def create(self, obj: T) -> T:
        """Add object to session (caller must commit)."""
        self.db.add(obj)
        self.db.flush()  # Assigns ID without committing
        return obj

    def create_many(self, objs: List[T]) -> List[T]:
        self.db.add_all(objs)
        self.db.flush()
        return objs

    def update(self, obj: T) -> T:
        """Flush pending attribute changes (caller must commit)."""
        self.db.flush()
        return obj

    def delete(self, id: int) -> bool:
        """Mark object for deletion (caller must commit)."""
        obj = self.get(id)
        if obj:
            self.db.delete(obj)
            self.db.flush()
            return True
        return False


class DatedRecordRepository(BaseRepository[T]):
    """Base for per-company records carrying a ``record_date`` column."""

    def find(
        self,
        *,
        company_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[T]:
        """All records matching an optional company and inclusive date range."""
        query = self.db.query(self.model)
        if company_id is not None:
            query = query.filter(self.model.company_id == company_id)
        for criterion in date_range_criteria(self.model.record_date, start_date, end_date):
            query = query.filter(criterion)
        return query.order_by(self.model.record_date, self.model.id).all()
