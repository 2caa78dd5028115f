from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from pearl.api.dependencies import get_fingerprint_service, http_error_for
from pearl.domain.errors import PearlError
from pearl.services.fingerprint_service import FingerprintService


router = APIRouter()


# ─────────────────────────────────────────────
# Request Schema
# ─────────────────────────────────────────────

class FingerprintCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, examples=["Maya Rivers"])
    birth_date: str = Field(..., examples=["1990-03-15"])
    birth_time: Optional[str] = Field(default=None, examples=["14:30"])
    latitude: float = Field(..., examples=[40.7128])
    longitude: float = Field(..., examples=[-74.006])
    city_name: Optional[str] = Field(default=None, examples=["New York"])
    country_code: Optional[str] = Field(default=None, examples=["US"])
    timezone: str = Field(default="UTC", examples=["America/New_York"])
    user_id: Optional[UUID] = None


# ─────────────────────────────────────────────
# Route
# ─────────────────────────────────────────────

@router.post(
    "/fingerprint",
    summary="Build a cosmic fingerprint from birth details",
)
async def create_fingerprint(
    payload: FingerprintCreateRequest,
    service: FingerprintService = Depends(get_fingerprint_service),
) -> Dict[str, Any]:
    """
    Astrology, Human Design, Kabbalah and Numerology combined into
    one fingerprint. A missing life purpose is still a 200.
    """
    try:
        return await service.create_fingerprint(
            payload=payload.model_dump(exclude={"user_id"}),
            user_id=payload.user_id,
        )
    except PearlError as exc:
        raise http_error_for(exc) from exc
