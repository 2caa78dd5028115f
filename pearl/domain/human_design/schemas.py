from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict


class HumanDesignType(str, Enum):
    GENERATOR = "Generator"
    MANIFESTING_GENERATOR = "Manifesting Generator"
    PROJECTOR = "Projector"
    MANIFESTOR = "Manifestor"
    REFLECTOR = "Reflector"

    @property
    def strategy(self) -> str:
        return _STRATEGIES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_STRATEGIES = {
    HumanDesignType.MANIFESTOR: "Inform Before Acting",
    HumanDesignType.GENERATOR: "Wait to Respond",
    HumanDesignType.MANIFESTING_GENERATOR: "Wait to Respond, Then Inform",
    HumanDesignType.PROJECTOR: "Wait for the Invitation",
    HumanDesignType.REFLECTOR: "Wait a Lunar Cycle",
}

_DESCRIPTIONS = {
    HumanDesignType.MANIFESTOR: (
        "You are here to initiate. Your energy creates impact and opens doors "
        "others cannot. The world moves when you do."
    ),
    HumanDesignType.GENERATOR: (
        "You are the life force of the world. Your sacral response guides you to "
        "what truly lights you up. Follow it, and your energy becomes unstoppable."
    ),
    HumanDesignType.MANIFESTING_GENERATOR: (
        "You carry both the power to initiate and the sustained energy to build. "
        "You are meant to explore many paths; your efficiency comes from following "
        "your response."
    ),
    HumanDesignType.PROJECTOR: (
        "You see what others cannot. Your gift is guiding and directing energy, but "
        "only when recognized and invited. Your wisdom is your superpower."
    ),
    HumanDesignType.REFLECTOR: (
        "You are a mirror for the world. Your openness allows you to sample all of "
        "life's possibilities. The lunar cycle is your compass."
    ),
}


class HDCenter(str, Enum):
    HEAD = "head"
    AJNA = "ajna"
    THROAT = "throat"
    G = "g"
    HEART = "heart"
    SACRAL = "sacral"
    SOLAR_PLEXUS = "solar_plexus"
    SPLEEN = "spleen"
    ROOT = "root"

    @property
    def display_name(self) -> str:
        if self is HDCenter.G:
            return "G Center"
        return self.value.replace("_", " ").title()


class Channel(BaseModel):
    """
    A channel joins two gates across two centers.
    """
    model_config = ConfigDict(frozen=True)

    gate1: int
    gate2: int
    center1: HDCenter
    center2: HDCenter
    name: str


class HumanDesignProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: HumanDesignType
    strategy: str
    authority: str
    profile: str
    defined_centers: List[HDCenter]
    undefined_centers: List[HDCenter]
    defined_channels: List[str] = []
