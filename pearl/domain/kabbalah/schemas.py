from typing import List
from pydantic import BaseModel, ConfigDict, Field


class SoulCorrection(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, le=72)
    name: str
    description: str
    challenge: str
    correction: str


class Sephirah(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    hebrew_name: str
    meaning: str
    quality: str
    position: int = Field(..., ge=1, le=10)


class TreePosition(BaseModel):
    """
    Activation strength (0.1 - 1.0) of one sephirah for a person.
    """
    model_config = ConfigDict(frozen=True)

    sephirah_name: str
    activation: float = Field(..., ge=0.0, le=1.0)
    description: str


class KabbalahProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    soul_correction: SoulCorrection
    birth_sephirah: Sephirah
    tree_of_life_positions: List[TreePosition]
    tikkun_path: str
