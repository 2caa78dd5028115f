from datetime import datetime
from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field, computed_field

from pearl.domain.astrology.schemas import Planet, ZodiacSign


PERSONAL_PLANETS = frozenset({
    Planet.SUN, Planet.MOON, Planet.MERCURY, Planet.VENUS, Planet.MARS,
})

OUTER_PLANETS = frozenset({
    Planet.SATURN, Planet.URANUS, Planet.NEPTUNE, Planet.PLUTO,
})


# ─────────────────────────────────────────────
# Aspect Types
# ─────────────────────────────────────────────

class AspectType(str, Enum):
    """
    The five major transit aspects.

    Each type carries its exact target angle and a fixed orb tolerance.
    The tolerance is the matching threshold, not the measured orb of a
    particular transit.
    """
    CONJUNCTION = "conjunction"
    SEXTILE = "sextile"
    SQUARE = "square"
    TRINE = "trine"
    OPPOSITION = "opposition"

    @property
    def target_degree(self) -> float:
        return _ASPECT_TABLE[self][0]

    @property
    def orb_tolerance(self) -> float:
        return _ASPECT_TABLE[self][1]

    @property
    def display_name(self) -> str:
        return _ASPECT_TABLE[self][2]

    @property
    def symbol(self) -> str:
        return _ASPECT_TABLE[self][3]

    @property
    def nature(self) -> str:
        return _ASPECT_TABLE[self][4]


# target, tolerance, display name, glyph, nature
_ASPECT_TABLE = {
    AspectType.CONJUNCTION: (0.0, 8.0, "conjunct", "☌", "intense focus"),
    AspectType.SEXTILE: (60.0, 5.0, "sextile", "⚹", "opportunity"),
    AspectType.SQUARE: (90.0, 7.0, "square", "□", "creative tension"),
    AspectType.TRINE: (120.0, 7.0, "trine", "△", "natural flow"),
    AspectType.OPPOSITION: (180.0, 8.0, "opposite", "☍", "awareness"),
}


class TransitSignificance(str, Enum):
    MAJOR = "major"
    MODERATE = "moderate"
    MINOR = "minor"

    @property
    def rank(self) -> int:
        return list(TransitSignificance).index(self)

    @classmethod
    def for_planet(cls, planet: Planet) -> "TransitSignificance":
        if planet in OUTER_PLANETS:
            return cls.MAJOR
        if planet == Planet.JUPITER:
            return cls.MODERATE
        return cls.MINOR


# ─────────────────────────────────────────────
# Transit Schemas
# ─────────────────────────────────────────────

class TransitPosition(BaseModel):
    """
    A planet's position in the current sky.
    """
    model_config = ConfigDict(frozen=True)

    planet: Planet
    sign: ZodiacSign
    degree: float
    is_retrograde: bool = False


class TransitAspect(BaseModel):
    """
    A transiting planet's aspect to a natal planet.
    """
    model_config = ConfigDict(frozen=True)

    transit_planet: Planet
    aspect_type: AspectType
    natal_planet: Planet
    orb: float = Field(..., ge=0)
    is_applying: bool

    @computed_field
    @property
    def significance(self) -> TransitSignificance:
        return TransitSignificance.for_planet(self.transit_planet)

    @computed_field
    @property
    def is_personal_planet(self) -> bool:
        return self.natal_planet in PERSONAL_PLANETS

    @property
    def display_description(self) -> str:
        direction = "(applying)" if self.is_applying else "(separating)"
        return (
            f"{self.transit_planet.display_name} {self.aspect_type.display_name} "
            f"your {self.natal_planet.display_name} {direction}"
        )


class TransitChart(BaseModel):
    """
    Current sky compared to a natal chart.

    `active_transits` is sorted by significance, then by orb.
    """
    model_config = ConfigDict(frozen=True)

    generated_at: datetime
    current_positions: List[TransitPosition]
    active_transits: List[TransitAspect]

    @computed_field
    @property
    def major_transits(self) -> List[TransitAspect]:
        return [
            t for t in self.active_transits
            if t.significance == TransitSignificance.MAJOR
        ]

    @computed_field
    @property
    def personal_transits(self) -> List[TransitAspect]:
        return [t for t in self.active_transits if t.is_personal_planet]
