import asyncio
import logging
import threading
from abc import ABC, abstractmethod
from datetime import date, time, datetime
from typing import Dict, List, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import swisseph as swe

from pearl.config import settings
from pearl.domain.astrology.aspects import calculate_natal_aspects
from pearl.domain.astrology.schemas import (
    HousePosition,
    NatalChart,
    Planet,
    PlanetaryPosition,
    ZodiacSign,
)
from pearl.domain.errors import InvalidBirthDataError, ProviderError


logger = logging.getLogger(__name__)

NOON = time(12, 0)


class EphemerisProvider(ABC):
    """
    Contract for anything that can turn a moment and a place
    into a natal chart.
    """

    @abstractmethod
    async def calculate_natal_chart(
        self,
        *,
        birth_date: date,
        birth_time: Optional[time],
        latitude: float,
        longitude: float,
        timezone: str = "UTC",
        city_name: Optional[str] = None,
        country_code: Optional[str] = None,
    ) -> NatalChart:
        """
        Calculate planetary positions, houses and natal aspects.

        Implementations raise ProviderError on any calculation failure.
        """
        raise NotImplementedError


class SwissEphemerisProvider(EphemerisProvider):
    """
    Tropical chart calculation backed by Swiss Ephemeris.

    This provider:
    - Uses data files when EPHEMERIS_PATH is set, Moshier otherwise
    - Only computes houses, rising and midheaven when a birth time is known
    - Runs the blocking swisseph calls in a worker thread
    """

    PLANET_MAPPING = {
        Planet.SUN: swe.SUN,
        Planet.MOON: swe.MOON,
        Planet.MERCURY: swe.MERCURY,
        Planet.VENUS: swe.VENUS,
        Planet.MARS: swe.MARS,
        Planet.JUPITER: swe.JUPITER,
        Planet.SATURN: swe.SATURN,
        Planet.URANUS: swe.URANUS,
        Planet.NEPTUNE: swe.NEPTUNE,
        Planet.PLUTO: swe.PLUTO,
        Planet.NORTH_NODE: swe.MEAN_NODE,
    }

    # swisseph keeps global state, so calls are serialised
    _lock = threading.Lock()

    def __init__(
        self,
        ephemeris_path: Optional[str] = None,
        house_system: Optional[str] = None,
        include_chiron: Optional[bool] = None,
    ):
        self.ephemeris_path = ephemeris_path or settings.EPHEMERIS_PATH
        self.house_system = (house_system or settings.HOUSE_SYSTEM).encode("ascii")
        self.include_chiron = (
            include_chiron
            if include_chiron is not None
            else settings.INCLUDE_CHIRON
        )

        if self.include_chiron and not self.ephemeris_path:
            raise ProviderError("Chiron requires Swiss Ephemeris data files (EPHEMERIS_PATH)")

        if self.ephemeris_path:
            swe.set_ephe_path(self.ephemeris_path)
            self.flags = swe.FLG_SWIEPH | swe.FLG_SPEED
        else:
            self.flags = swe.FLG_MOSEPH | swe.FLG_SPEED

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    async def calculate_natal_chart(
        self,
        *,
        birth_date: date,
        birth_time: Optional[time],
        latitude: float,
        longitude: float,
        timezone: str = "UTC",
        city_name: Optional[str] = None,
        country_code: Optional[str] = None,
    ) -> NatalChart:
        self._validate_location(latitude, longitude)
        moment = self._to_utc_datetime(birth_date, birth_time or NOON, timezone)

        logger.debug(
            f"Calculating chart for {moment.isoformat()} at ({latitude:.4f}, {longitude:.4f}) "
            f"{city_name or ''} {country_code or ''}"
        )

        return await asyncio.to_thread(
            self.calculate,
            moment,
            latitude,
            longitude,
            birth_time is not None,
        )

    def calculate(
        self,
        moment_utc: datetime,
        latitude: float,
        longitude: float,
        with_houses: bool = True,
    ) -> NatalChart:
        """
        Synchronous chart calculation for a naive UTC datetime.
        """
        with self._lock:
            try:
                julian_day = self._julian_day(moment_utc)
                longitudes = self._calculate_longitudes(julian_day)

                cusps: Optional[Sequence[float]] = None
                ascmc: Optional[Sequence[float]] = None
                if with_houses:
                    cusps, ascmc = swe.houses(
                        julian_day, latitude, longitude, self.house_system
                    )
            except swe.Error as exc:
                logger.error(f"Swiss Ephemeris calculation failed: {exc}")
                raise ProviderError(f"Ephemeris calculation failed: {exc}") from exc

        planets = [
            PlanetaryPosition(
                planet=planet,
                sign=ZodiacSign.from_longitude(lon),
                degree=lon,
                house=self._house_for(lon, cusps) if cusps else None,
                is_retrograde=retrograde,
            )
            for planet, (lon, retrograde) in longitudes.items()
        ]

        houses: Optional[List[HousePosition]] = None
        rising_sign = None
        midheaven_sign = None
        if cusps and ascmc:
            houses = [
                HousePosition(
                    house=i + 1,
                    sign=ZodiacSign.from_longitude(cusp),
                    degree=self._normalize(cusp),
                )
                for i, cusp in enumerate(cusps[:12])
            ]
            rising_sign = ZodiacSign.from_longitude(ascmc[0])
            midheaven_sign = ZodiacSign.from_longitude(ascmc[1])

        return NatalChart(
            sun_sign=ZodiacSign.from_longitude(longitudes[Planet.SUN][0]),
            moon_sign=ZodiacSign.from_longitude(longitudes[Planet.MOON][0]),
            rising_sign=rising_sign,
            midheaven_sign=midheaven_sign,
            planets=planets,
            houses=houses,
            aspects=calculate_natal_aspects(planets),
        )

    # ─────────────────────────────────────────────
    # Time & Astronomy Helpers
    # ─────────────────────────────────────────────

    def _calculate_longitudes(self, julian_day: float) -> Dict[Planet, Tuple[float, bool]]:
        mapping = dict(self.PLANET_MAPPING)
        if self.include_chiron:
            mapping[Planet.CHIRON] = swe.CHIRON

        longitudes: Dict[Planet, Tuple[float, bool]] = {}
        for planet, pid in mapping.items():
            res = swe.calc_ut(julian_day, pid, self.flags)
            lon = res[0][0]
            speed = res[0][3]
            longitudes[planet] = (self._normalize(lon), speed < 0)

        return longitudes

    def _to_utc_datetime(
        self,
        birth_date: date,
        birth_time: time,
        timezone: str,
    ) -> datetime:
        """
        Convert local birth date & time into a naive UTC datetime.
        """
        local_dt = datetime.combine(birth_date, birth_time.replace(tzinfo=None))

        try:
            local_tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidBirthDataError(f"Unknown timezone '{timezone}'") from exc

        utc_dt = local_dt.replace(tzinfo=local_tz).astimezone(ZoneInfo("UTC"))
        return utc_dt.replace(tzinfo=None)

    def _julian_day(self, dt: datetime) -> float:
        hour_decimal = dt.hour + dt.minute / 60.0 + dt.second / 3600.0
        return swe.julday(dt.year, dt.month, dt.day, hour_decimal)

    @staticmethod
    def _house_for(longitude: float, cusps: Sequence[float]) -> int:
        """
        House whose cusp interval contains the longitude.
        """
        for i in range(12):
            start = cusps[i]
            end = cusps[(i + 1) % 12]
            span = (end - start) % 360
            if (longitude - start) % 360 < span:
                return i + 1
        return 12

    @staticmethod
    def _normalize(longitude: float) -> float:
        return round(longitude, 4) % 360.0

    @staticmethod
    def _validate_location(latitude: float, longitude: float) -> None:
        if not -90.0 <= latitude <= 90.0:
            raise InvalidBirthDataError(f"Latitude out of range: {latitude}")
        if not -180.0 <= longitude <= 180.0:
            raise InvalidBirthDataError(f"Longitude out of range: {longitude}")
