import math
from typing import List

from pearl.domain.astrology.schemas import Planet
from pearl.domain.errors import InvalidAngleError
from pearl.domain.transits.schemas import AspectType, TransitAspect


def angular_distance(a: float, b: float) -> float:
    """
    Shortest arc between two longitudes, always within [0, 180].
    """
    diff = abs(a - b)
    return min(diff, 360.0 - diff)


def find_aspects(
    transit_planet: Planet,
    transit_degree: float,
    natal_planet: Planet,
    natal_degree: float,
) -> List[TransitAspect]:
    """
    Match a transit/natal pair against the five aspect types.

    A pair can match more than one type only where tolerances overlap.
    Direction uses the simple zodiacal heuristic: the aspect is applying
    while the transit longitude is below natal + target.
    """
    _validate_longitude(transit_degree, "transit_degree")
    _validate_longitude(natal_degree, "natal_degree")

    distance = angular_distance(transit_degree, natal_degree)

    results: List[TransitAspect] = []
    for aspect_type in AspectType:
        deviation = abs(distance - aspect_type.target_degree)
        if deviation > aspect_type.orb_tolerance:
            continue

        results.append(
            TransitAspect(
                transit_planet=transit_planet,
                aspect_type=aspect_type,
                natal_planet=natal_planet,
                orb=deviation,
                is_applying=transit_degree < natal_degree + aspect_type.target_degree,
            )
        )

    return results


def _validate_longitude(value: float, name: str) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidAngleError(f"{name} must be a finite number, got {value!r}")
    if not 0.0 <= value < 360.0:
        raise InvalidAngleError(f"{name} must be within [0, 360), got {value}")
