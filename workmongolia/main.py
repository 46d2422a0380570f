"""FastAPI application entry point"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from workmongolia.core.config import settings
from workmongolia.core.logging import setup_logging, get_logger
from workmongolia.core.middleware import RequestIDMiddleware, LoggingMiddleware, request_id_of
from workmongolia.core.exceptions import WorkMongoliaException
from workmongolia.fixtures.mock_data import mock_company_source, mock_user_source
from workmongolia.api import directory, master

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
## WorkMongolia

Job board backend for candidates, employers and administrators.

* **Directory**: read-only users and companies
* **Recruitment master**: departments, employment types, experience levels,
  preferred industries and skills, managed from the admin screen
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    openapi_tags=[
        {"name": "Directory", "description": "Users and companies"},
        {"name": "Recruitment Master", "description": "Job options and skills managed by administrators"},
    ],
)

# Mock-backed directory; tests swap the sources through dependency overrides
app.state.user_source = mock_user_source()
app.state.company_source = mock_company_source()

# The last middleware added runs first, so request IDs exist before logging
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(request: Request, status_code: int, error: str, details=None) -> JSONResponse:
    """The JSON error body every failing endpoint returns"""
    body = {"error": error, "details": details or {}, "request_id": request_id_of(request)}
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


@app.exception_handler(WorkMongoliaException)
async def workmongolia_exception_handler(request: Request, exc: WorkMongoliaException):
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(exc.message, extra={"request_id": request_id_of(request), "status_code": exc.status_code})
    return error_response(request, exc.status_code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(
        f"Rejected payload: {len(errors)} validation error(s)",
        extra={"request_id": request_id_of(request), "status_code": 422}
    )
    return error_response(request, status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", errors)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Unique constraints backstop the service-level duplicate checks
    logger.error(f"Integrity error: {exc.orig}", extra={"request_id": request_id_of(request)})
    return error_response(
        request,
        status.HTTP_409_CONFLICT,
        "Database constraint violation",
        {"message": "A record with the same name already exists"}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception: {exc!r}",
        extra={"request_id": request_id_of(request)},
        exc_info=True
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        {"message": "An unexpected error occurred"}
    )


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} ({settings.ENVIRONMENT})")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"Stopping {settings.APP_NAME}")


@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


app.include_router(directory.router, prefix=settings.API_V1_PREFIX, tags=["Directory"])
app.include_router(master.router, prefix=f"{settings.API_V1_PREFIX}/admin", tags=["Recruitment Master"])
