"""User repository."""

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from esg_api.models.user import UserModel
from esg_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, db: Session):
        super().__init__(db, UserModel)

    def get_by_username(self, username: str) -> Optional[UserModel]:
        return self.db.query(self.model).filter(self.model.username == username).first()

    def get_active_by_username(self, username: str) -> Optional[UserModel]:
        return (
            self.db.query(self.model)
            .filter(self.model.username == username, self.model.is_active.is_(True))
            .first()
        )

    def username_or_email_taken(self, username: str, email: str) -> bool:
        return (
            self.db.query(self.model.id)
            .filter(or_(self.model.username == username, self.model.email == email))
            .first()
            is not None
        )
