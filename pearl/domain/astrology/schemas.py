from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


# ─────────────────────────────────────────────
# Enumerations
# ─────────────────────────────────────────────

class Element(str, Enum):
    FIRE = "fire"
    EARTH = "earth"
    AIR = "air"
    WATER = "water"


class ZodiacSign(str, Enum):
    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    CANCER = "cancer"
    LEO = "leo"
    VIRGO = "virgo"
    LIBRA = "libra"
    SCORPIO = "scorpio"
    SAGITTARIUS = "sagittarius"
    CAPRICORN = "capricorn"
    AQUARIUS = "aquarius"
    PISCES = "pisces"

    @property
    def ordinal(self) -> int:
        return list(ZodiacSign).index(self)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        return "♈♉♊♋♌♍♎♏♐♑♒♓"[self.ordinal]

    @property
    def element(self) -> Element:
        # Fire, earth, air, water repeat every four signs
        return list(Element)[self.ordinal % 4]

    @property
    def opposite(self) -> "ZodiacSign":
        return list(ZodiacSign)[(self.ordinal + 6) % 12]

    @classmethod
    def from_longitude(cls, longitude: float) -> "ZodiacSign":
        return list(cls)[int((longitude % 360) // 30) % 12]


class Planet(str, Enum):
    SUN = "sun"
    MOON = "moon"
    MERCURY = "mercury"
    VENUS = "venus"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"
    PLUTO = "pluto"
    NORTH_NODE = "north_node"
    CHIRON = "chiron"

    @property
    def display_name(self) -> str:
        if self is Planet.NORTH_NODE:
            return "North Node"
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        return "☉☽☿♀♂♃♄♅♆♇☊⚷"[list(Planet).index(self)]


# ─────────────────────────────────────────────
# Chart Schemas
# ─────────────────────────────────────────────

class PlanetaryPosition(BaseModel):
    """
    A single planet's tropical position in a chart.
    """
    model_config = ConfigDict(frozen=True)

    planet: Planet
    sign: ZodiacSign
    degree: float = Field(..., ge=0, lt=360)
    house: Optional[int] = Field(default=None, ge=1, le=12)
    is_retrograde: bool = False


class HousePosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    house: int = Field(..., ge=1, le=12)
    sign: ZodiacSign
    degree: float = Field(..., ge=0, lt=360)


class NatalAspectType(str, Enum):
    CONJUNCTION = "conjunction"
    OPPOSITION = "opposition"
    TRINE = "trine"
    SQUARE = "square"
    SEXTILE = "sextile"


class NatalAspect(BaseModel):
    """
    Aspect between two planets of the same chart.
    """
    model_config = ConfigDict(frozen=True)

    planet1: Planet
    planet2: Planet
    type: NatalAspectType
    orb: float


class NatalChart(BaseModel):
    """
    Chart snapshot produced by an ephemeris provider.

    Rising and midheaven signs are only known when a birth time is given.
    """
    model_config = ConfigDict(frozen=True)

    sun_sign: ZodiacSign
    moon_sign: ZodiacSign
    rising_sign: Optional[ZodiacSign] = None
    midheaven_sign: Optional[ZodiacSign] = None
    planets: List[PlanetaryPosition]
    houses: Optional[List[HousePosition]] = None
    aspects: List[NatalAspect] = Field(default_factory=list)

    def position_of(self, planet: Planet) -> Optional[PlanetaryPosition]:
        """
        First position matching the planet, if any.
        """
        return next((p for p in self.planets if p.planet == planet), None)


class AstrologySnapshot(BaseModel):
    """
    The astrology section of a cosmic fingerprint.
    """
    model_config = ConfigDict(frozen=True)

    sun_sign: ZodiacSign
    moon_sign: ZodiacSign
    rising_sign: Optional[ZodiacSign] = None
    midheaven_sign: Optional[ZodiacSign] = None
    planetary_positions: List[PlanetaryPosition]
    houses: Optional[List[HousePosition]] = None
    aspects: List[NatalAspect] = Field(default_factory=list)

    @classmethod
    def from_chart(cls, chart: NatalChart) -> "AstrologySnapshot":
        return cls(
            sun_sign=chart.sun_sign,
            moon_sign=chart.moon_sign,
            rising_sign=chart.rising_sign,
            midheaven_sign=chart.midheaven_sign,
            planetary_positions=chart.planets,
            houses=chart.houses,
            aspects=chart.aspects,
        )
