from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pearl.api.dependencies import get_transit_service, http_error_for
from pearl.domain.astrology.schemas import NatalChart
from pearl.domain.errors import PearlError
from pearl.services.transit_service import TransitService


router = APIRouter()


class TransitRequest(BaseModel):
    natal_chart: NatalChart
    timestamp: Optional[datetime] = None


@router.post(
    "/transits",
    summary="Current transits against a natal chart",
)
async def get_transits(
    payload: TransitRequest,
    service: TransitService = Depends(get_transit_service),
) -> Dict[str, Any]:
    try:
        return await service.get_current(
            natal_chart=payload.natal_chart,
            timestamp=payload.timestamp,
        )
    except PearlError as exc:
        raise http_error_for(exc) from exc
