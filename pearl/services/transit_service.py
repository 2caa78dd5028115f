from datetime import datetime
from typing import Any, Dict, Optional

from pearl.domain.astrology.schemas import NatalChart
from pearl.domain.transits.transit_calculator import TransitCalculator


class TransitService:
    """
    Service wrapper around domain transit logic.

    Used by:
    - POST /api/v1/transits
    """

    def __init__(self, calculator: TransitCalculator | None = None):
        self.calculator = calculator or TransitCalculator()

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def get_current(
        self,
        *,
        natal_chart: NatalChart,
        timestamp: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Current transits against a natal chart.
        """
        transit_chart = await self.calculator.calculate_transits(
            natal_chart,
            now=timestamp,
        )
        return transit_chart.model_dump(mode="json")
