"""Health check endpoint of the private API."""

from fastapi import APIRouter

from payid import __version__

router = APIRouter()


@router.get("/health", summary="Health check")
async def health_check() -> dict:
    """Health check endpoint.

    Returns service status and version info.
    """
    return {
        "status": "healthy",
        "version": __version__,
    }
