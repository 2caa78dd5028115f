from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4
from pydantic import BaseModel, ConfigDict, Field

from pearl.domain.astrology.schemas import AstrologySnapshot
from pearl.domain.human_design.schemas import HumanDesignProfile
from pearl.domain.kabbalah.schemas import KabbalahProfile
from pearl.domain.life_purpose.schemas import LifePurposeProfile
from pearl.domain.numerology.schemas import NumerologyProfile


class PearlSynthesis(BaseModel):
    """
    Narrative fields derived from the four core profiles.

    pearl_summary is left empty for a later enrichment step.
    """
    model_config = ConfigDict(frozen=True)

    life_purpose: str
    core_themes: List[str]
    superpower: str
    shadow: str
    invitation: str
    pearl_summary: str = ""


class SubsystemStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


class SubsystemOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    subsystem: str
    status: SubsystemStatus
    detail: Optional[str] = None


class LifePurposePolicy(str, Enum):
    """
    What a build does when Life Purpose fails.

    SUPPRESS keeps the fingerprint and records the failure,
    SURFACE fails the build.
    """
    SUPPRESS = "suppress"
    SURFACE = "surface"


class CosmicFingerprint(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    user_id: Optional[UUID] = None
    generated_at: datetime

    astrology: AstrologySnapshot
    human_design: HumanDesignProfile
    kabbalah: KabbalahProfile
    numerology: NumerologyProfile

    life_purpose: Optional[LifePurposeProfile] = None
    life_purpose_outcome: SubsystemOutcome

    synthesis: PearlSynthesis
