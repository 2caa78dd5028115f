from fastapi import APIRouter

from pearl.api.v1.routes.health import router as health_router
from pearl.api.v1.routes.fingerprint import router as fingerprint_router
from pearl.api.v1.routes.transits import router as transits_router

api_router = APIRouter()

# ─────────────────────────────────────────────
# Public Routes
# ─────────────────────────────────────────────

api_router.include_router(
    health_router,
    tags=["Health"],
)

api_router.include_router(
    fingerprint_router,
    tags=["Fingerprint"],
)

api_router.include_router(
    transits_router,
    tags=["Transits"],
)
