from datetime import date, time, timedelta
from typing import List, Optional, Set

from pearl.domain.human_design.schemas import (
    Channel,
    HDCenter,
    HumanDesignProfile,
    HumanDesignType,
)


# Gates in wheel order starting at 0° Aries, 5.625° each
GATE_ORDER = [
    41, 19, 13, 49, 30, 55, 37, 63, 22, 36, 25, 17, 21, 51, 42, 3,
    27, 24, 2, 23, 8, 20, 16, 35, 45, 12, 15, 52, 39, 53, 62, 56,
    31, 33, 7, 4, 29, 59, 40, 64, 47, 6, 46, 18, 48, 57, 32, 50,
    28, 44, 1, 43, 14, 34, 9, 5, 26, 11, 10, 58, 38, 54, 61, 60,
]

GATE_SPAN = 360.0 / 64

DESIGN_OFFSET = timedelta(days=88)

MOTOR_CENTERS = frozenset({HDCenter.HEART, HDCenter.SOLAR_PLEXUS, HDCenter.ROOT})

# First defined center in this order decides the authority
AUTHORITY_ORDER = [
    (HDCenter.SOLAR_PLEXUS, "Emotional (Solar Plexus)"),
    (HDCenter.SACRAL, "Sacral"),
    (HDCenter.SPLEEN, "Splenic"),
    (HDCenter.HEART, "Ego/Heart"),
    (HDCenter.G, "Self-Projected"),
    (HDCenter.AJNA, "Mental (Environment)"),
]

LUNAR_AUTHORITY = "Lunar (Outer Authority)"


def _channel(gate1: int, gate2: int, center1: HDCenter, center2: HDCenter, name: str) -> Channel:
    return Channel(gate1=gate1, gate2=gate2, center1=center1, center2=center2, name=name)


CHANNELS = [
    # Head to Ajna
    _channel(64, 47, HDCenter.HEAD, HDCenter.AJNA, "Abstraction"),
    _channel(61, 24, HDCenter.HEAD, HDCenter.AJNA, "Awareness"),
    _channel(63, 4, HDCenter.HEAD, HDCenter.AJNA, "Logic"),
    # Ajna to Throat
    _channel(17, 62, HDCenter.AJNA, HDCenter.THROAT, "Acceptance"),
    _channel(43, 23, HDCenter.AJNA, HDCenter.THROAT, "Structuring"),
    _channel(11, 56, HDCenter.AJNA, HDCenter.THROAT, "Curiosity"),
    # Throat to G
    _channel(31, 7, HDCenter.THROAT, HDCenter.G, "The Alpha"),
    _channel(8, 1, HDCenter.THROAT, HDCenter.G, "Inspiration"),
    _channel(33, 13, HDCenter.THROAT, HDCenter.G, "The Prodigal"),
    # Throat to others
    _channel(20, 34, HDCenter.THROAT, HDCenter.SACRAL, "Charisma"),
    _channel(20, 57, HDCenter.THROAT, HDCenter.SPLEEN, "The Brainwave"),
    _channel(16, 48, HDCenter.THROAT, HDCenter.SPLEEN, "The Wavelength"),
    _channel(12, 22, HDCenter.THROAT, HDCenter.SOLAR_PLEXUS, "Openness"),
    _channel(35, 36, HDCenter.THROAT, HDCenter.SOLAR_PLEXUS, "Transitoriness"),
    _channel(45, 21, HDCenter.THROAT, HDCenter.HEART, "Money"),
    # G connections
    _channel(10, 34, HDCenter.G, HDCenter.SACRAL, "Exploration"),
    _channel(10, 57, HDCenter.G, HDCenter.SPLEEN, "Perfected Form"),
    _channel(15, 5, HDCenter.G, HDCenter.SACRAL, "Rhythm"),
    _channel(46, 29, HDCenter.G, HDCenter.SACRAL, "Discovery"),
    _channel(2, 14, HDCenter.G, HDCenter.SACRAL, "The Beat"),
    _channel(25, 51, HDCenter.G, HDCenter.HEART, "Initiation"),
    # Heart connections
    _channel(26, 44, HDCenter.HEART, HDCenter.SPLEEN, "Surrender"),
    _channel(40, 37, HDCenter.HEART, HDCenter.SOLAR_PLEXUS, "Community"),
    # Sacral connections
    _channel(59, 6, HDCenter.SACRAL, HDCenter.SOLAR_PLEXUS, "Intimacy"),
    _channel(27, 50, HDCenter.SACRAL, HDCenter.SPLEEN, "Preservation"),
    _channel(34, 57, HDCenter.SACRAL, HDCenter.SPLEEN, "Power"),
    _channel(3, 60, HDCenter.SACRAL, HDCenter.ROOT, "Mutation"),
    _channel(42, 53, HDCenter.SACRAL, HDCenter.ROOT, "Maturation"),
    _channel(9, 52, HDCenter.SACRAL, HDCenter.ROOT, "Concentration"),
    # Spleen connections
    _channel(28, 38, HDCenter.SPLEEN, HDCenter.ROOT, "Struggle"),
    _channel(18, 58, HDCenter.SPLEEN, HDCenter.ROOT, "Judgment"),
    _channel(32, 54, HDCenter.SPLEEN, HDCenter.ROOT, "Transformation"),
    # Solar Plexus connections
    _channel(30, 41, HDCenter.SOLAR_PLEXUS, HDCenter.ROOT, "Recognition"),
    _channel(55, 39, HDCenter.SOLAR_PLEXUS, HDCenter.ROOT, "Emoting"),
    _channel(49, 19, HDCenter.SOLAR_PLEXUS, HDCenter.ROOT, "Synthesis"),
]


class HumanDesignCalculator:
    """
    Derives a Human Design body graph from birth data.

    Gates come from a date-based approximation of the Sun's position
    for the personality (birth) and design (88 days earlier) moments.
    """

    calculation_version = "v1"

    def calculate(
        self,
        birth_date: date,
        birth_time: Optional[time] = None,
        latitude: float = 0.0,
        longitude: float = 0.0,
    ) -> HumanDesignProfile:
        personality_gates = self.personality_gates(birth_date)
        design_gates = self.personality_gates(birth_date - DESIGN_OFFSET)
        all_gates = set(personality_gates) | set(design_gates)

        defined_channels = [
            channel for channel in CHANNELS
            if channel.gate1 in all_gates and channel.gate2 in all_gates
        ]

        defined: Set[HDCenter] = set()
        for channel in defined_channels:
            defined.add(channel.center1)
            defined.add(channel.center2)

        hd_type = self.determine_type(defined)

        return HumanDesignProfile(
            type=hd_type,
            strategy=hd_type.strategy,
            authority=self.determine_authority(defined),
            profile=self.profile_for(birth_date),
            defined_centers=[c for c in HDCenter if c in defined],
            undefined_centers=[c for c in HDCenter if c not in defined],
            defined_channels=[c.name for c in defined_channels],
        )

    # ─────────────────────────────────────────────
    # Gates
    # ─────────────────────────────────────────────

    def personality_gates(self, on: date) -> List[int]:
        day_of_year = on.timetuple().tm_yday
        sun_longitude = day_of_year / 365.25 * 360.0

        gate_index = int(sun_longitude / GATE_SPAN) % 64
        earth_index = (gate_index + 32) % 64

        return [
            GATE_ORDER[gate_index],
            GATE_ORDER[earth_index],
            GATE_ORDER[(on.month * 5 + on.day) % 64],
            GATE_ORDER[(on.month * 3 + on.day * 2) % 64],
            GATE_ORDER[(on.day * 7) % 64],
        ]

    # ─────────────────────────────────────────────
    # Type, authority, profile
    # ─────────────────────────────────────────────

    @staticmethod
    def determine_type(defined: Set[HDCenter]) -> HumanDesignType:
        has_sacral = HDCenter.SACRAL in defined
        motor_to_throat = HDCenter.THROAT in defined and bool(defined & MOTOR_CENTERS)

        if has_sacral and motor_to_throat:
            return HumanDesignType.MANIFESTING_GENERATOR
        if has_sacral:
            return HumanDesignType.GENERATOR
        if motor_to_throat:
            return HumanDesignType.MANIFESTOR
        if len(defined) >= 2:
            return HumanDesignType.PROJECTOR
        return HumanDesignType.REFLECTOR

    @staticmethod
    def determine_authority(defined: Set[HDCenter]) -> str:
        for center, authority in AUTHORITY_ORDER:
            if center in defined:
                return authority
        return LUNAR_AUTHORITY

    @staticmethod
    def profile_for(birth_date: date) -> str:
        personality_line = ((birth_date.day + birth_date.month) % 6) + 1
        design_line = ((birth_date.day * 2 + birth_date.month) % 6) + 1
        return f"{personality_line}/{design_line}"
