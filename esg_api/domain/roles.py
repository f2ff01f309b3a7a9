"""User roles and the capability groups the API checks against."""

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "Admin"
    MANAGER = "Manager"
    USER = "User"


ADMIN_ONLY = (UserRole.ADMIN,)
MANAGER_OR_ADMIN = (UserRole.ADMIN, UserRole.MANAGER)
