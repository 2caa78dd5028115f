"""
Narrative synthesis over the four core profiles.

Every function here is a pure string composition: identical profiles
always produce identical text.
"""

from typing import List, Optional

from pearl.domain.astrology.schemas import AstrologySnapshot, Planet
from pearl.domain.errors import IncompleteProfileError
from pearl.domain.fingerprint.schemas import PearlSynthesis
from pearl.domain.human_design.schemas import HumanDesignProfile
from pearl.domain.kabbalah.schemas import KabbalahProfile
from pearl.domain.numerology.schemas import NumerologyProfile


SHADOW_SUFFIX = (
    "This is not something to fix, it is the raw material of your transformation."
)


def life_purpose_statement(
    astrology: AstrologySnapshot,
    human_design: HumanDesignProfile,
    numerology: NumerologyProfile,
) -> str:
    return (
        f"As a {astrology.sun_sign.display_name} Sun with a "
        f"{astrology.moon_sign.display_name} Moon and {human_design.type.value} design, "
        f"your life purpose flows through a Life Path {numerology.life_path.value} calling. "
        f"You are designed to {human_design.strategy.lower()} and let your inner "
        f"authority guide you home."
    )


def core_themes(
    astrology: AstrologySnapshot,
    human_design: HumanDesignProfile,
    kabbalah: KabbalahProfile,
    numerology: NumerologyProfile,
) -> List[str]:
    sun = astrology.sun_sign
    themes = [
        f"{sun.display_name} essence: {sun.element.value.capitalize()} energy",
        f"{human_design.type.value}: {human_design.strategy}",
        f"Soul correction: {kabbalah.soul_correction.name}",
        f"Life Path {numerology.life_path.value}: {_keyword(numerology, 0)}",
    ]

    if astrology.rising_sign is not None:
        themes.insert(1, f"{astrology.rising_sign.display_name} Rising: how the world sees you")

    if astrology.midheaven_sign is not None:
        themes.append(f"MC in {astrology.midheaven_sign.display_name}: your public calling")

    return themes


def superpower(astrology: AstrologySnapshot, human_design: HumanDesignProfile) -> str:
    sun = astrology.sun_sign
    return (
        f"Your superpower lives at the intersection of your {human_design.type.value} "
        f"energy and your {sun.display_name} {sun.element.value} nature. When you "
        f"{human_design.strategy.lower()}, your gifts naturally radiate."
    )


def shadow(astrology: AstrologySnapshot, kabbalah: KabbalahProfile) -> str:
    saturn = next(
        (p for p in astrology.planetary_positions if p.planet == Planet.SATURN),
        None,
    )

    if saturn is not None:
        opening = (
            f"Saturn in {saturn.sign.display_name} challenges you to master "
            f"{saturn.sign.display_name.lower()} lessons"
        )
    else:
        opening = "Your Saturn placement teaches patience"

    return (
        f"{opening}, connecting to your Kabbalistic challenge of "
        f"{kabbalah.soul_correction.challenge.lower()}. {SHADOW_SUFFIX}"
    )


def invitation(human_design: HumanDesignProfile, numerology: NumerologyProfile) -> str:
    keywords = " and ".join(numerology.life_path.keywords[:2]).lower()
    return (
        f"The invitation is clear: {human_design.strategy.lower()}, and let your "
        f"Life Path {numerology.life_path.value} energy of {keywords} guide your steps."
    )


def synthesize(
    astrology: Optional[AstrologySnapshot],
    human_design: Optional[HumanDesignProfile],
    kabbalah: Optional[KabbalahProfile],
    numerology: Optional[NumerologyProfile],
) -> PearlSynthesis:
    missing = [
        name for name, profile in (
            ("astrology", astrology),
            ("human_design", human_design),
            ("kabbalah", kabbalah),
            ("numerology", numerology),
        )
        if profile is None
    ]
    if missing:
        raise IncompleteProfileError(f"Missing profiles: {', '.join(missing)}")

    return PearlSynthesis(
        life_purpose=life_purpose_statement(astrology, human_design, numerology),
        core_themes=core_themes(astrology, human_design, kabbalah, numerology),
        superpower=superpower(astrology, human_design),
        shadow=shadow(astrology, kabbalah),
        invitation=invitation(human_design, numerology),
        pearl_summary="",
    )


def _keyword(numerology: NumerologyProfile, index: int) -> str:
    keywords = numerology.life_path.keywords
    return keywords[index] if len(keywords) > index else ""
