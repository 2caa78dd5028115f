import asyncio
import logging
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Optional, Tuple
from uuid import UUID

from pearl.config import settings
from pearl.domain.astrology.ephemeris import EphemerisProvider, SwissEphemerisProvider
from pearl.domain.astrology.schemas import AstrologySnapshot, NatalChart
from pearl.domain.errors import PearlError, ProviderError
from pearl.domain.fingerprint.schemas import (
    CosmicFingerprint,
    LifePurposePolicy,
    SubsystemOutcome,
    SubsystemStatus,
)
from pearl.domain.fingerprint.synthesis import synthesize
from pearl.domain.human_design.calculator import HumanDesignCalculator
from pearl.domain.kabbalah.calculator import KabbalahCalculator
from pearl.domain.life_purpose.calculator import LifePurposeCalculator
from pearl.domain.life_purpose.schemas import LifePurposeProfile
from pearl.domain.numerology.calculator import NumerologyCalculator


logger = logging.getLogger(__name__)

LIFE_PURPOSE = "life_purpose"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CosmicFingerprintBuilder:
    """
    Builds a cosmic fingerprint from birth data.

    Pipeline:
    1. Natal chart, then Life Purpose (astrology branch)
    2. Human Design, Kabbalah and Numerology alongside the astrology branch
    3. Synthesis once all four core profiles exist

    A failing core subsystem aborts the whole build and cancels whatever
    is still running. Life Purpose failures follow the configured policy.
    """

    def __init__(
        self,
        ephemeris: EphemerisProvider | None = None,
        human_design: HumanDesignCalculator | None = None,
        kabbalah: KabbalahCalculator | None = None,
        numerology: NumerologyCalculator | None = None,
        life_purpose: LifePurposeCalculator | None = None,
        enable_life_purpose: bool | None = None,
        life_purpose_policy: LifePurposePolicy | str | None = None,
        timeout: float | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.ephemeris = ephemeris or SwissEphemerisProvider()
        self.human_design = human_design or HumanDesignCalculator()
        self.kabbalah = kabbalah or KabbalahCalculator()
        self.numerology = numerology or NumerologyCalculator()
        self.life_purpose = life_purpose or LifePurposeCalculator(clock=clock)

        self.enable_life_purpose = (
            enable_life_purpose
            if enable_life_purpose is not None
            else settings.ENABLE_LIFE_PURPOSE
        )
        self.life_purpose_policy = LifePurposePolicy(
            life_purpose_policy or settings.LIFE_PURPOSE_POLICY
        )
        self.timeout = timeout if timeout is not None else settings.EPHEMERIS_TIMEOUT
        self.clock = clock

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def build(
        self,
        name: str,
        birth_date: date,
        birth_time: Optional[time] = None,
        *,
        latitude: float,
        longitude: float,
        city_name: Optional[str] = None,
        country_code: Optional[str] = None,
        timezone: str = "UTC",
        user_id: Optional[UUID] = None,
    ) -> CosmicFingerprint:
        generated_at = self.clock()
        logger.info(f"Building cosmic fingerprint for birth_date={birth_date}")

        tasks = [
            asyncio.create_task(
                self._astrology_branch(
                    name=name,
                    birth_date=birth_date,
                    birth_time=birth_time,
                    latitude=latitude,
                    longitude=longitude,
                    timezone=timezone,
                    city_name=city_name,
                    country_code=country_code,
                )
            ),
            asyncio.create_task(
                self._run_subsystem(
                    "human_design",
                    self.human_design.calculate,
                    birth_date,
                    birth_time,
                    latitude,
                    longitude,
                )
            ),
            asyncio.create_task(
                self._run_subsystem(
                    "kabbalah",
                    self.kabbalah.calculate_profile,
                    birth_date,
                    name,
                )
            ),
            asyncio.create_task(
                self._run_subsystem(
                    "numerology",
                    self.numerology.calculate_profile,
                    birth_date,
                    name,
                    generated_at.date(),
                )
            ),
        ]

        try:
            astrology_result, human_design, kabbalah, numerology = await asyncio.gather(*tasks)
        except BaseException:
            # Covers both a failing subsystem and cancellation of build()
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error("Fingerprint build aborted")
            raise

        natal_chart, life_purpose, outcome = astrology_result
        astrology = AstrologySnapshot.from_chart(natal_chart)

        fingerprint = CosmicFingerprint(
            user_id=user_id,
            generated_at=generated_at,
            astrology=astrology,
            human_design=human_design,
            kabbalah=kabbalah,
            numerology=numerology,
            life_purpose=life_purpose,
            life_purpose_outcome=outcome,
            synthesis=synthesize(astrology, human_design, kabbalah, numerology),
        )

        logger.info(
            f"Fingerprint {fingerprint.id} built "
            f"(life_purpose={outcome.status.value})"
        )
        return fingerprint

    # ─────────────────────────────────────────────
    # Astrology branch
    # ─────────────────────────────────────────────

    async def _astrology_branch(
        self,
        *,
        name: str,
        birth_date: date,
        birth_time: Optional[time],
        latitude: float,
        longitude: float,
        timezone: str,
        city_name: Optional[str],
        country_code: Optional[str],
    ) -> Tuple[NatalChart, Optional[LifePurposeProfile], SubsystemOutcome]:
        try:
            natal_chart = await asyncio.wait_for(
                self.ephemeris.calculate_natal_chart(
                    birth_date=birth_date,
                    birth_time=birth_time,
                    latitude=latitude,
                    longitude=longitude,
                    timezone=timezone,
                    city_name=city_name,
                    country_code=country_code,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.error(f"Natal chart timed out after {self.timeout}s")
            raise ProviderError("Ephemeris provider timed out") from exc
        except PearlError:
            raise
        except Exception as exc:
            logger.error(f"Natal chart failed: {exc}")
            raise ProviderError(f"Ephemeris provider failed: {exc}") from exc

        life_purpose, outcome = await self._life_purpose(natal_chart, name)
        return natal_chart, life_purpose, outcome

    async def _life_purpose(
        self,
        natal_chart: NatalChart,
        name: str,
    ) -> Tuple[Optional[LifePurposeProfile], SubsystemOutcome]:
        if not self.enable_life_purpose:
            return None, SubsystemOutcome(
                subsystem=LIFE_PURPOSE,
                status=SubsystemStatus.UNAVAILABLE,
                detail="Life Purpose is disabled",
            )

        try:
            profile = await asyncio.wait_for(
                asyncio.to_thread(
                    self.life_purpose.generate_life_purpose, natal_chart, name
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            return self._life_purpose_failed(
                exc, f"Life Purpose timed out after {self.timeout}s"
            )
        except Exception as exc:
            return self._life_purpose_failed(exc, str(exc))

        return profile, SubsystemOutcome(
            subsystem=LIFE_PURPOSE,
            status=SubsystemStatus.AVAILABLE,
        )

    def _life_purpose_failed(
        self,
        exc: BaseException,
        detail: str,
    ) -> Tuple[Optional[LifePurposeProfile], SubsystemOutcome]:
        """
        Apply the Life Purpose policy to a failure.
        """
        if self.life_purpose_policy is LifePurposePolicy.SURFACE:
            logger.error(f"Life Purpose failed: {detail}")
            raise ProviderError(f"Life Purpose failed: {detail}") from exc

        logger.warning(f"Life Purpose unavailable, continuing without it: {detail}")
        return None, SubsystemOutcome(
            subsystem=LIFE_PURPOSE,
            status=SubsystemStatus.FAILED,
            detail=detail,
        )

    # ─────────────────────────────────────────────
    # Internal helpers
    # ─────────────────────────────────────────────

    @staticmethod
    async def _run_subsystem(name: str, func: Callable[..., Any], *args: Any) -> Any:
        """
        Run a blocking calculator off the event loop.

        Domain errors pass through, anything else becomes a ProviderError.
        """
        try:
            return await asyncio.to_thread(func, *args)
        except PearlError:
            raise
        except Exception as exc:
            logger.error(f"{name} calculator failed: {exc}")
            raise ProviderError(f"{name} calculator failed") from exc
