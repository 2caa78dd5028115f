from typing import List, Sequence

from pearl.domain.astrology.schemas import NatalAspect, NatalAspectType, PlanetaryPosition
from pearl.domain.transits.aspect_matcher import angular_distance


# Natal orbs are tighter than transit orbs for trine, square and sextile
NATAL_ASPECTS = [
    (NatalAspectType.CONJUNCTION, 0.0, 8.0),
    (NatalAspectType.OPPOSITION, 180.0, 8.0),
    (NatalAspectType.TRINE, 120.0, 6.0),
    (NatalAspectType.SQUARE, 90.0, 6.0),
    (NatalAspectType.SEXTILE, 60.0, 4.0),
]


def calculate_natal_aspects(planets: Sequence[PlanetaryPosition]) -> List[NatalAspect]:
    """
    Aspects between every unordered pair of planets in a chart.
    """
    aspects: List[NatalAspect] = []

    for i, first in enumerate(planets):
        for second in planets[i + 1:]:
            distance = angular_distance(first.degree, second.degree)

            for aspect_type, target, max_orb in NATAL_ASPECTS:
                orb = abs(distance - target)
                if orb <= max_orb:
                    aspects.append(
                        NatalAspect(
                            planet1=first.planet,
                            planet2=second.planet,
                            type=aspect_type,
                            orb=round(orb, 2),
                        )
                    )

    return aspects
