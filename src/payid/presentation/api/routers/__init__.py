"""API routers."""

from payid.presentation.api.routers.health import router as health_router
from payid.presentation.api.routers.payment_information import (
    router as payment_information_router,
)

__all__ = [
    "health_router",
    "payment_information_router",
]
