import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pearl.config import settings
from pearl.domain.astrology.ephemeris import EphemerisProvider, SwissEphemerisProvider
from pearl.domain.astrology.schemas import NatalChart
from pearl.domain.errors import PearlError, ProviderError
from pearl.domain.transits.aspect_matcher import find_aspects
from pearl.domain.transits.schemas import TransitAspect, TransitChart, TransitPosition


logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TransitCalculator:
    """
    Compares the current sky against a natal chart.

    This calculator:
    - Queries the ephemeris for "now" at (0, 0); ecliptic longitude
      does not depend on the observer
    - Matches every current position against every natal position
    - Fails as a whole when the ephemeris fails
    """

    def __init__(
        self,
        ephemeris: EphemerisProvider | None = None,
        timeout: float | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.ephemeris = ephemeris or SwissEphemerisProvider()
        self.timeout = timeout if timeout is not None else settings.EPHEMERIS_TIMEOUT
        self.clock = clock

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def calculate_transits(
        self,
        natal_chart: NatalChart,
        now: Optional[datetime] = None,
    ) -> TransitChart:
        """
        Build the transit report for a natal chart.
        """
        now = now or self.clock()
        current_positions = await self._current_positions(now)

        active_transits: List[TransitAspect] = []
        for transit_pos in current_positions:
            for natal_pos in natal_chart.planets:
                active_transits.extend(
                    find_aspects(
                        transit_planet=transit_pos.planet,
                        transit_degree=transit_pos.degree,
                        natal_planet=natal_pos.planet,
                        natal_degree=natal_pos.degree,
                    )
                )

        active_transits.sort(key=lambda t: (t.significance.rank, t.orb))

        return TransitChart(
            generated_at=now,
            current_positions=current_positions,
            active_transits=active_transits,
        )

    # ─────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────

    async def _current_positions(self, now: datetime) -> List[TransitPosition]:
        utc_now = now.astimezone(timezone.utc) if now.tzinfo else now

        try:
            sky = await asyncio.wait_for(
                self.ephemeris.calculate_natal_chart(
                    birth_date=utc_now.date(),
                    birth_time=utc_now.time().replace(tzinfo=None),
                    latitude=0.0,
                    longitude=0.0,
                    timezone="UTC",
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.error(f"Ephemeris timed out after {self.timeout}s")
            raise ProviderError("Ephemeris provider timed out") from exc
        except ProviderError:
            logger.error("Ephemeris provider failed while computing current sky")
            raise
        except PearlError:
            raise
        except Exception as exc:
            logger.error(f"Ephemeris provider failed while computing current sky: {exc}")
            raise ProviderError(f"Ephemeris provider failed: {exc}") from exc

        return [
            TransitPosition(
                planet=pos.planet,
                sign=pos.sign,
                degree=pos.degree,
                is_retrograde=pos.is_retrograde,
            )
            for pos in sky.planets
        ]
