"""Exception hierarchy shared by services, engines and the HTTP layer.

Every error carries the HTTP status it maps to, so ``main.py`` can render
the error envelope without knowing which layer raised it.
"""

from typing import Optional


class ESGAPIError(Exception):
    """Base class for all errors the API reports to clients."""

    status_code: int = 400

    def __init__(self, message: str, details: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code


class InvalidArgumentError(ESGAPIError, ValueError):
    """Malformed or out-of-range input (bad period, metric, limit...)."""

    status_code = 400


class CompanyNotFoundError(ESGAPIError):
    """A record references a company that does not exist."""

    status_code = 400

    def __init__(self, company_id: Optional[int] = None):
        details = f"companyId={company_id}" if company_id is not None else None
        super().__init__("Company not found", details=details)
        self.company_id = company_id


class DuplicateReportError(ESGAPIError):
    status_code = 400

    def __init__(self, company_id: int, year: int, quarter: int):
        super().__init__(
            "A report already exists for this company in the specified period",
            details=f"companyId={company_id}, year={year}, quarter={quarter}",
        )


class ConflictError(ESGAPIError):
    """A unique value (CNPJ, username, email) is already taken."""

    status_code = 400


class NotFoundError(ESGAPIError):
    status_code = 404


class AuthenticationError(ESGAPIError):
    status_code = 401


class PermissionDeniedError(ESGAPIError):
    status_code = 403
