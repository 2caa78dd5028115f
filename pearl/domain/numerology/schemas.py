from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class NumerologyNumber(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    value: int
    is_master_number: bool = False
    meaning: str
    keywords: List[str]


class Pinnacle(BaseModel):
    """
    A life period ruled by one number. The last pinnacle is open-ended.
    """
    model_config = ConfigDict(frozen=True)

    period: int
    number: int
    meaning: str
    start_age: int
    end_age: Optional[int] = None


class Challenge(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: int
    number: int
    meaning: str


class NumerologyProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    life_path: NumerologyNumber
    expression: NumerologyNumber
    soul_urge: NumerologyNumber
    personality: NumerologyNumber
    birthday: NumerologyNumber
    personal_year: int
    personal_year_theme: str
    pinnacles: List[Pinnacle]
    challenges: List[Challenge]
