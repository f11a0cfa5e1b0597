"""Health check API endpoints."""
from fastapi import APIRouter

router = APIRouter(tags=["health"])

SERVICE_NAME = "ILO Builder Backend"
SERVICE_VERSION = "1.0.0"


@router.get("/")
def read_root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION
    }
