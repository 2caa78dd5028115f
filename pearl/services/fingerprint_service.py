import logging
from datetime import date, time
from typing import Any, Dict, Optional
from uuid import UUID

from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.fingerprint.builder import CosmicFingerprintBuilder


logger = logging.getLogger(__name__)


class FingerprintService:
    """
    Service wrapper around the cosmic fingerprint builder.

    Used by:
    - POST /api/v1/fingerprint
    """

    def __init__(self, builder: CosmicFingerprintBuilder | None = None):
        self.builder = builder or CosmicFingerprintBuilder()

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def create_fingerprint(
        self,
        *,
        payload: Dict[str, Any],
        user_id: Optional[UUID] = None,
    ) -> Dict[str, Any]:
        """
        Build a fingerprint from raw birth details and return it as JSON-ready data.
        """
        birth_date = self._parse(date, payload["birth_date"], "birth_date")
        birth_time = (
            self._parse(time, payload["birth_time"], "birth_time")
            if payload.get("birth_time")
            else None
        )

        fingerprint = await self.builder.build(
            name=payload["name"],
            birth_date=birth_date,
            birth_time=birth_time,
            latitude=payload["latitude"],
            longitude=payload["longitude"],
            city_name=payload.get("city_name"),
            country_code=payload.get("country_code"),
            timezone=payload.get("timezone") or "UTC",
            user_id=user_id,
        )

        return fingerprint.model_dump(mode="json")

    @staticmethod
    def _parse(kind, value: str, field: str):
        try:
            return kind.fromisoformat(value)
        except (TypeError, ValueError) as exc:
            raise InvalidBirthDataError(f"Invalid {field}: {value!r}") from exc
