import asyncio
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from pearl.domain.astrology.ephemeris import EphemerisProvider
from pearl.domain.astrology.schemas import (
    AstrologySnapshot,
    NatalChart,
    Planet,
    PlanetaryPosition,
    ZodiacSign,
)
from pearl.domain.human_design.schemas import HDCenter, HumanDesignProfile, HumanDesignType
from pearl.domain.kabbalah.calculator import KabbalahCalculator
from pearl.domain.numerology.calculator import NumerologyCalculator


BIRTH_DATE = date(1990, 3, 15)
NAME = "Maya Rivers"
FIXED_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


def position(planet: Planet, degree: float, house: Optional[int] = None) -> PlanetaryPosition:
    return PlanetaryPosition(
        planet=planet,
        sign=ZodiacSign.from_longitude(degree),
        degree=degree,
        house=house,
    )


def make_chart(
    degrees: Optional[Dict[Planet, float]] = None,
    rising: Optional[ZodiacSign] = None,
    midheaven: Optional[ZodiacSign] = None,
) -> NatalChart:
    degrees = degrees if degrees is not None else {
        Planet.SUN: 5.0,         # Aries
        Planet.MOON: 95.0,       # Cancer
        Planet.SATURN: 285.0,    # Capricorn
        Planet.NORTH_NODE: 305.0,  # Aquarius
    }
    planets: List[PlanetaryPosition] = [position(p, d) for p, d in degrees.items()]
    return NatalChart(
        sun_sign=ZodiacSign.from_longitude(degrees.get(Planet.SUN, 5.0)),
        moon_sign=ZodiacSign.from_longitude(degrees.get(Planet.MOON, 95.0)),
        rising_sign=rising,
        midheaven_sign=midheaven,
        planets=planets,
    )


def make_astrology(**kwargs) -> AstrologySnapshot:
    return AstrologySnapshot.from_chart(make_chart(**kwargs))


def make_human_design() -> HumanDesignProfile:
    return HumanDesignProfile(
        type=HumanDesignType.GENERATOR,
        strategy=HumanDesignType.GENERATOR.strategy,
        authority="Sacral",
        profile="1/4",
        defined_centers=[HDCenter.SACRAL, HDCenter.ROOT],
        undefined_centers=[
            c for c in HDCenter if c not in (HDCenter.SACRAL, HDCenter.ROOT)
        ],
        defined_channels=["Mutation"],
    )


def make_kabbalah():
    return KabbalahCalculator().calculate_profile(BIRTH_DATE, NAME)


def make_numerology():
    return NumerologyCalculator().calculate_profile(BIRTH_DATE, NAME, as_of=FIXED_NOW.date())


class FakeEphemeris(EphemerisProvider):
    """
    In-memory ephemeris that records its calls.
    """

    def __init__(
        self,
        chart: Optional[NatalChart] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.chart = chart or make_chart()
        self.error = error
        self.delay = delay
        self.calls: List[dict] = []
        self.cancelled = False

    async def calculate_natal_chart(self, **kwargs) -> NatalChart:
        self.calls.append(kwargs)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise

        if self.error is not None:
            raise self.error
        return self.chart
