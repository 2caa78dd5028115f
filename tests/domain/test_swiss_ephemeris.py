import unittest
from datetime import date, time

from pearl.domain.astrology.aspects import calculate_natal_aspects
from pearl.domain.astrology.ephemeris import SwissEphemerisProvider
from pearl.domain.astrology.schemas import Planet, ZodiacSign
from pearl.domain.errors import InvalidBirthDataError, ProviderError
from tests.fixtures import position


class TestSwissEphemerisProvider(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.provider = SwissEphemerisProvider(house_system="P", include_chiron=False)

    async def test_chart_with_birth_time(self):
        chart = await self.provider.calculate_natal_chart(
            birth_date=date(1990, 3, 15),
            birth_time=time(14, 30),
            latitude=40.7128,
            longitude=-74.006,
            timezone="America/New_York",
        )

        self.assertEqual(chart.sun_sign, ZodiacSign.PISCES)
        self.assertIsNotNone(chart.rising_sign)
        self.assertIsNotNone(chart.midheaven_sign)
        self.assertEqual(len(chart.houses), 12)
        self.assertEqual(len(chart.planets), 11)
        for pos in chart.planets:
            self.assertGreaterEqual(pos.house, 1)
            self.assertLessEqual(pos.house, 12)

    async def test_chart_without_birth_time(self):
        chart = await self.provider.calculate_natal_chart(
            birth_date=date(1990, 3, 15),
            birth_time=None,
            latitude=40.7128,
            longitude=-74.006,
        )

        self.assertIsNone(chart.rising_sign)
        self.assertIsNone(chart.midheaven_sign)
        self.assertIsNone(chart.houses)
        self.assertIsNotNone(chart.position_of(Planet.NORTH_NODE))

    async def test_unknown_timezone(self):
        with self.assertRaises(InvalidBirthDataError):
            await self.provider.calculate_natal_chart(
                birth_date=date(1990, 3, 15),
                birth_time=None,
                latitude=0.0,
                longitude=0.0,
                timezone="Mars/Olympus_Mons",
            )

    async def test_latitude_out_of_range(self):
        with self.assertRaises(InvalidBirthDataError):
            await self.provider.calculate_natal_chart(
                birth_date=date(1990, 3, 15),
                birth_time=None,
                latitude=95.0,
                longitude=0.0,
            )

    def test_chiron_requires_data_files(self):
        with self.assertRaises(ProviderError):
            SwissEphemerisProvider(ephemeris_path="", include_chiron=True)

    def test_house_for_wraps_past_pisces(self):
        cusps = [330.0 + 30.0 * i for i in range(12)]
        cusps = [c % 360 for c in cusps]

        self.assertEqual(SwissEphemerisProvider._house_for(340.0, cusps), 1)
        self.assertEqual(SwissEphemerisProvider._house_for(5.0, cusps), 2)
        self.assertEqual(SwissEphemerisProvider._house_for(329.0, cusps), 12)


class TestNatalAspects(unittest.TestCase):
    def test_pairs_checked_once(self):
        planets = [
            position(Planet.SUN, 10.0),
            position(Planet.MOON, 190.0),
            position(Planet.MARS, 12.0),
        ]

        aspects = calculate_natal_aspects(planets)

        found = {(a.planet1, a.planet2, a.type.value, a.orb) for a in aspects}
        self.assertEqual(found, {
            (Planet.SUN, Planet.MOON, "opposition", 0.0),
            (Planet.SUN, Planet.MARS, "conjunction", 2.0),
            (Planet.MOON, Planet.MARS, "opposition", 2.0),
        })


if __name__ == "__main__":
    unittest.main()
