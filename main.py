"""
ILO Builder Backend - FastAPI Application

Serves the one-shot enhancement endpoint used by the ABCD wizard.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import get_settings, validate_required_settings
from ilo.api import enhance
from shared.api import health
from shared.utils.exceptions import ILOBuilderException, InvalidRequestException

# Validate configuration on startup
validate_required_settings()

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="ILO Builder Backend",
    description="AI feedback for ABCD-structured Intended Learning Outcomes",
    version=health.SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(ILOBuilderException)
async def ilo_builder_exception_handler(request: Request, exc: ILOBuilderException):
    return exc.to_json_response()


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected body on {request.method} {request.url.path}: {exc.errors()}")
    return InvalidRequestException().to_json_response()


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An error occurred while enhancing the ILO",
            "details": "Internal server error",
            "code": "INTERNAL_ERROR",
        },
    )


# Include routers
app.include_router(health.router)
app.include_router(enhance.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development"
    )
