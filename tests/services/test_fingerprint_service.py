import unittest

from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.fingerprint.builder import CosmicFingerprintBuilder
from pearl.services.fingerprint_service import FingerprintService
from pearl.services.transit_service import TransitService
from pearl.domain.transits.transit_calculator import TransitCalculator
from tests.fixtures import FakeEphemeris, fixed_clock, make_chart


PAYLOAD = {
    "name": "Maya Rivers",
    "birth_date": "1990-03-15",
    "birth_time": "14:30",
    "latitude": 40.7128,
    "longitude": -74.006,
    "timezone": "America/New_York",
}


class TestFingerprintService(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.ephemeris = FakeEphemeris()
        self.service = FingerprintService(
            builder=CosmicFingerprintBuilder(
                ephemeris=self.ephemeris,
                enable_life_purpose=True,
                timeout=1.0,
                clock=fixed_clock,
            )
        )

    async def test_returns_json_ready_dict(self):
        result = await self.service.create_fingerprint(payload=PAYLOAD)

        self.assertIsInstance(result["id"], str)
        self.assertEqual(result["astrology"]["sun_sign"], "aries")
        self.assertEqual(result["life_purpose_outcome"]["status"], "available")
        self.assertEqual(self.ephemeris.calls[0]["birth_time"].hour, 14)

    async def test_birth_time_optional(self):
        payload = dict(PAYLOAD, birth_time=None)

        await self.service.create_fingerprint(payload=payload)

        self.assertIsNone(self.ephemeris.calls[0]["birth_time"])

    async def test_malformed_date_rejected(self):
        payload = dict(PAYLOAD, birth_date="15/03/1990")

        with self.assertRaises(InvalidBirthDataError):
            await self.service.create_fingerprint(payload=payload)


class TestTransitService(unittest.IsolatedAsyncioTestCase):
    async def test_returns_json_ready_dict(self):
        service = TransitService(
            calculator=TransitCalculator(
                ephemeris=FakeEphemeris(chart=make_chart()),
                timeout=1.0,
                clock=fixed_clock,
            )
        )

        result = await service.get_current(natal_chart=make_chart())

        self.assertIn("active_transits", result)
        self.assertIn("major_transits", result)
        self.assertEqual(result["generated_at"], "2026-01-01T12:00:00Z")


if __name__ == "__main__":
    unittest.main()
