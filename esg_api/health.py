"""Health check endpoints with dependency checking.

Provides health checks for:
- Database connectivity
- Token signing configuration
- Application status
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from esg_api.config import Settings
from esg_api.database import get_db
from esg_api.dependencies import get_settings
from esg_api.logging_config import get_logger

router = APIRouter()
logger = get_logger(__name__)

DEFAULT_SECRET_PREFIX = "change-me"
MIN_SECRET_LENGTH = 32


def check_database(db: Session) -> Dict[str, Any]:
    """Check database connectivity.

    Returns:
        Dict with status and optional error message.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"healthy": True, "message": "Database connected"}
    except Exception as e:
        logger.error("database_health_check_failed", error=str(e))
        return {"healthy": False, "message": f"Database error: {str(e)}"}


def check_auth_config(settings: Settings) -> Dict[str, Any]:
    """Flag a missing, short or default JWT signing key."""
    secret = settings.jwt_secret_key
    if not secret:
        return {"healthy": False, "message": "JWT secret key not configured"}
    if secret.startswith(DEFAULT_SECRET_PREFIX):
        return {"healthy": False, "message": "JWT secret key is the development default"}
    if len(secret) < MIN_SECRET_LENGTH:
        return {"healthy": False, "message": f"JWT secret key shorter than {MIN_SECRET_LENGTH} characters"}
    return {"healthy": True, "message": "JWT signing configured"}


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Basic health check - just app status."""
    return {"status": "healthy", "service": settings.app_name, "version": settings.app_version}


@router.get("/health/detailed")
def detailed_health_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Detailed health check with dependency status.

    Checks:
    - Database connectivity
    - JWT signing configuration
    """
    checks = {
        "database": check_database(db),
        "auth": check_auth_config(settings),
    }

    all_healthy = all(check["healthy"] for check in checks.values())
    overall_status = "healthy" if all_healthy else "degraded"

    logger.info(
        "health_check_performed",
        status=overall_status,
        database=checks["database"]["healthy"],
        auth=checks["auth"]["healthy"],
    )

    return {
        "status": overall_status,
        "service": settings.app_name,
        "version": settings.app_version,
        "checks": checks,
    }


@router.get("/health/ready")
def readiness_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Readiness probe: 200 if the database answers, 503 otherwise."""
    if not check_database(db)["healthy"]:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return {"ready": True}


@router.get("/health/live")
def liveness_check() -> Dict[str, Any]:
    return {"alive": True}
