"""Password hashing and JWT bearer tokens.

Pure helpers only; the FastAPI dependencies that read the Authorization
header live in ``esg_api.dependencies``.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Tuple

from jose import JWTError, jwt
from passlib.context import CryptContext

from esg_api.config import Settings
from esg_api.errors import AuthenticationError
from esg_api.models.user import UserModel

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user: UserModel, settings: Settings) -> Tuple[str, datetime]:
    """Issue a signed token for ``user``; returns (token, expiry)."""
    now = datetime.now(timezone.utc)
    expires_at = now + timedelta(minutes=settings.jwt_expiration_minutes)
    claims: Dict[str, Any] = {
        "sub": str(user.id),
        "name": user.username,
        "email": user.email,
        "given_name": user.first_name or "",
        "family_name": user.last_name or "",
        "role": user.role,
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    if user.company_id is not None:
        claims["company_id"] = str(user.company_id)

    token = jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return token, expires_at


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Validate signature, expiry, issuer and audience.

    Raises:
        AuthenticationError: If the token is malformed, expired or forged.
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError as exc:
        raise AuthenticationError("Invalid or expired token", details=str(exc))
