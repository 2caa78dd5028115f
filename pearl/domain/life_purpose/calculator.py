import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from pearl.domain.astrology.schemas import NatalChart, Planet
from pearl.domain.errors import LifePurposeError
from pearl.domain.life_purpose.schemas import LifePurposeProfile, PurposeSourceData
from pearl.domain.life_purpose.themes import (
    MIDHEAVEN_THEMES,
    NORTH_NODE_THEMES,
    SATURN_THEMES,
    SUN_THEMES,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LifePurposeCalculator:
    """
    Composes a life purpose reading from the Sun, North Node,
    Midheaven and Saturn placements of a natal chart.

    The South Node is taken as the sign opposite the North Node.
    """

    calculation_version = "v1"

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or _utc_now

    def generate_life_purpose(self, natal_chart: NatalChart, user_name: str) -> LifePurposeProfile:
        sun = natal_chart.position_of(Planet.SUN)
        if sun is None:
            raise LifePurposeError("Natal chart has no Sun position")

        saturn = natal_chart.position_of(Planet.SATURN)
        north_node = natal_chart.position_of(Planet.NORTH_NODE)
        midheaven = natal_chart.midheaven_sign

        sun_name = sun.sign.display_name
        sun_theme = SUN_THEMES[sun.sign]
        node_theme = NORTH_NODE_THEMES[north_node.sign] if north_node else ""
        saturn_theme = SATURN_THEMES[saturn.sign] if saturn else ""
        mc_theme = MIDHEAVEN_THEMES[midheaven] if midheaven else ""

        leadership = f"You lead with the {sun_name} energy of {sun_theme.lower()}."
        if saturn_theme:
            leadership += (
                f" Saturn in {saturn.sign.display_name} adds "
                f"{saturn_theme.lower()} to your authority."
            )

        if saturn_theme:
            long_term = (
                f"Saturn teaches you {saturn_theme.lower()}. This is the long game, "
                f"the mastery that deepens with every year. Trust the slow build."
            )
        else:
            long_term = (
                "Your long-term mastery unfolds through patience and dedication to your craft."
            )

        direction = north_node.sign.display_name if north_node else "cosmic"
        headline = (
            f"Your purpose lives at the intersection of {sun_name} vitality "
            f"and {direction} direction."
        )
        if user_name and user_name.strip():
            headline = f"{user_name.strip()}, {headline[0].lower()}{headline[1:]}"

        logger.debug(f"Composed life purpose for sun={sun.sign.value}")

        return LifePurposeProfile(
            headline=headline,
            purpose_direction=(
                f"Your soul is moving toward {node_theme.lower() or 'its own direction'}. "
                f"With your Sun in {sun_name}, your core vitality shines through "
                f"{sun_theme.lower()}. This lifetime is about growing beyond what's "
                f"comfortable into what's calling you."
            ),
            career_alignment=(
                f"Your Midheaven points toward {mc_theme.lower() or 'a calling still revealing itself'}. "
                f"You thrive in roles where you can practice {sun_theme.lower()} while "
                f"building something meaningful. Look for work that lets your "
                f"{sun_name} nature lead."
            ),
            leadership_style=leadership,
            fulfillment_drivers=(
                f"You feel most alive through {node_theme.lower() or 'following your own direction'}. "
                f"Your South Node patterns may pull you toward old comforts, but your "
                f"soul grows every time you choose the North Node path."
            ),
            long_term_path=long_term,
            source_data=PurposeSourceData(
                sun_sign=sun_name,
                sun_house=sun.house,
                north_node_sign=north_node.sign.display_name if north_node else "Unknown",
                north_node_house=north_node.house if north_node else None,
                south_node_sign=north_node.sign.opposite.display_name if north_node else None,
                midheaven_sign=midheaven.display_name if midheaven else None,
                saturn_sign=saturn.sign.display_name if saturn else "Unknown",
                saturn_house=saturn.house if saturn else None,
            ),
            generated_at=self.clock(),
        )
