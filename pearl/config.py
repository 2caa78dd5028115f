from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "pearl-core"
    ENV: str = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # ─── Swiss Ephemeris ──────────────────
    # Without data files swisseph falls back to the Moshier ephemeris
    EPHEMERIS_PATH: Optional[str] = None
    HOUSE_SYSTEM: str = "P"
    INCLUDE_CHIRON: bool = False
    EPHEMERIS_TIMEOUT: float = 10.0

    # ─── Life Purpose ─────────────────────
    ENABLE_LIFE_PURPOSE: bool = True
    LIFE_PURPOSE_POLICY: str = "suppress"


    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
