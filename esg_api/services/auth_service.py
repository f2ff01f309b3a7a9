"""User registration, login and password management."""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from esg_api.config import Settings
from esg_api.domain.roles import UserRole
from esg_api.errors import AuthenticationError, CompanyNotFoundError, ConflictError, InvalidArgumentError, NotFoundError
from esg_api.models.user import UserModel
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.user_repo import UserRepository
from esg_api.schemas.auth import ChangePasswordRequest, LoginResponse, RegisterRequest, UserInfo
from esg_api.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    def __init__(
        self,
        db: Session,
        user_repo: UserRepository,
        company_repo: CompanyRepository,
        settings: Settings,
    ):
        self.db = db
        self.users = user_repo
        self.companies = company_repo
        self.settings = settings

    def login(self, username: str, password: str) -> LoginResponse:
        user = self.users.get_active_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        user.last_login_at = datetime.now(timezone.utc)
        self.users.update(user)
        self.db.commit()
        self.db.refresh(user)

        token, expires_at = create_access_token(user, self.settings)
        logger.info("User %s logged in", user.username)
        return LoginResponse(token=token, expires_at=expires_at, user=UserInfo.model_validate(user))

    def register(self, data: RegisterRequest) -> UserInfo:
        """Create a plain ``User``; elevated roles are assigned out of band."""
        if self.users.username_or_email_taken(data.username, data.email):
            raise ConflictError("Username or email already exists")
        if data.company_id is not None and self.companies.get(data.company_id) is None:
            raise CompanyNotFoundError(data.company_id)

        user = self.users.create(UserModel(
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            role=UserRole.USER.value,
            company_id=data.company_id,
            is_active=True,
        ))
        self.db.commit()
        self.db.refresh(user)
        logger.info("Registered user %s", user.username)
        return UserInfo.model_validate(user)

    def profile(self, user_id: int) -> UserInfo:
        return UserInfo.model_validate(self._active_user(user_id))

    def change_password(self, user_id: int, data: ChangePasswordRequest) -> None:
        user = self._active_user(user_id)
        if not verify_password(data.current_password, user.password_hash):
            raise InvalidArgumentError("Current password is incorrect")

        user.password_hash = hash_password(data.new_password)
        self.users.update(user)
        self.db.commit()
        logger.info("Password changed for user %s", user.username)

    def _active_user(self, user_id: int) -> UserModel:
        user = self.users.get(user_id)
        if user is None or not user.is_active:
            raise NotFoundError("User not found", details=f"id={user_id}")
        return user
