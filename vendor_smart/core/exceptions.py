"""Application-level exceptions and FastAPI exception handlers."""


from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: str = "INTERNAL_ERROR",
        headers: dict[str, str] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.headers = headers
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404, code="NOT_FOUND")

class UnauthorizedError(AppException):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message,
            status_code=401,
            code="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Basic"},
        )

class BadRequestError(AppException):
    def __init__(self, message: str, code: str = "BAD_REQUEST"):
        super().__init__(message, status_code=400, code=code)

class ConflictError(AppException):
    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message, status_code=409, code=code)

# ---------------------------------------------------------------------------
# Registry errors: caller input or state conflicts, never retried
# ---------------------------------------------------------------------------

class InvalidServiceReference(BadRequestError):
    def __init__(self, message: str = "Invalid service reference for this job"):
        super().__init__(message, code="INVALID_SERVICE_REFERENCE")

class InvalidLocationReference(BadRequestError):
    def __init__(self, message: str = "Invalid location reference for this job"):
        super().__init__(message, code="INVALID_LOCATION_REFERENCE")

class InvalidServiceComplianceReference(BadRequestError):
    def __init__(self, service_id: int):
        self.service_id = service_id
        super().__init__(
            f"Invalid service compliance reference: {service_id}",
            code="INVALID_SERVICE_COMPLIANCE_REFERENCE",
        )

class DuplicateJobForSlot(ConflictError):
    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(
            f"A job for this location and service exists: {job_id}",
            code="DUPLICATE_JOB_FOR_SLOT",
        )

class DuplicateJobId(ConflictError):
    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"A job with id {job_id} already exists", code="DUPLICATE_JOB_ID")

class DuplicateVendor(ConflictError):
    def __init__(self, vendor_id: int):
        self.vendor_id = vendor_id
        super().__init__(f"This vendor already exists: {vendor_id}", code="DUPLICATE_VENDOR")

class CatalogLoadError(Exception):
    """Raised when the reference catalog cannot be loaded. Fatal at startup."""

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Framework-raised errors, e.g. a malformed Basic Authorization header
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(HTTPStatus(exc.status_code).name, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
