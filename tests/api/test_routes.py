import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from pearl.api.dependencies import get_fingerprint_service, get_transit_service
from pearl.config import settings
from pearl.domain.astrology.schemas import Planet
from pearl.domain.errors import ProviderError
from pearl.domain.fingerprint.builder import CosmicFingerprintBuilder
from pearl.domain.transits.transit_calculator import TransitCalculator
from pearl.main import app
from pearl.services.fingerprint_service import FingerprintService
from pearl.services.transit_service import TransitService
from tests.fixtures import FakeEphemeris, fixed_clock, make_chart


BIRTH_DETAILS = {
    "name": "Maya Rivers",
    "birth_date": "1990-03-15",
    "birth_time": "14:30",
    "latitude": 40.7128,
    "longitude": -74.006,
    "timezone": "America/New_York",
}


def fingerprint_service(ephemeris: FakeEphemeris) -> FingerprintService:
    return FingerprintService(
        builder=CosmicFingerprintBuilder(ephemeris=ephemeris, timeout=1.0, clock=fixed_clock)
    )


def transit_service(ephemeris: FakeEphemeris) -> TransitService:
    return TransitService(
        calculator=TransitCalculator(ephemeris=ephemeris, timeout=1.0, clock=fixed_clock)
    )


class TestRoutes(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_health(self):
        response = self.client.get("/api/v1/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok", "service": settings.APP_NAME})

    def test_create_fingerprint(self):
        app.dependency_overrides[get_fingerprint_service] = (
            lambda: fingerprint_service(FakeEphemeris())
        )

        response = self.client.post("/api/v1/fingerprint", json=BIRTH_DETAILS)

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["astrology"]["sun_sign"], "aries")
        self.assertEqual(body["synthesis"]["pearl_summary"], "")
        self.assertIn("life_purpose_outcome", body)

    def test_fingerprint_provider_failure_is_503(self):
        app.dependency_overrides[get_fingerprint_service] = (
            lambda: fingerprint_service(FakeEphemeris(error=ProviderError("down")))
        )

        response = self.client.post("/api/v1/fingerprint", json=BIRTH_DETAILS)

        self.assertEqual(response.status_code, 503)

    def test_fingerprint_bad_birth_date_is_422(self):
        app.dependency_overrides[get_fingerprint_service] = (
            lambda: fingerprint_service(FakeEphemeris())
        )

        response = self.client.post(
            "/api/v1/fingerprint",
            json=dict(BIRTH_DETAILS, birth_date="not-a-date"),
        )

        self.assertEqual(response.status_code, 422)

    def test_fingerprint_missing_name_is_422(self):
        app.dependency_overrides[get_fingerprint_service] = (
            lambda: fingerprint_service(FakeEphemeris())
        )
        details = {k: v for k, v in BIRTH_DETAILS.items() if k != "name"}

        response = self.client.post("/api/v1/fingerprint", json=details)

        self.assertEqual(response.status_code, 422)

    def test_transits(self):
        sky = make_chart({Planet.SUN: 250.0, Planet.MOON: 11.0, Planet.SATURN: 100.0})
        app.dependency_overrides[get_transit_service] = lambda: transit_service(FakeEphemeris(chart=sky))
        natal = make_chart({Planet.SUN: 10.0, Planet.MOON: 200.0})

        response = self.client.post(
            "/api/v1/transits",
            json={"natal_chart": natal.model_dump(mode="json")},
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        first = body["active_transits"][0]
        self.assertEqual(first["transit_planet"], "saturn")
        self.assertEqual(first["aspect_type"], "square")
        self.assertEqual(first["significance"], "major")
        self.assertEqual(len(body["major_transits"]), 1)

    def test_transits_provider_failure_is_503(self):
        app.dependency_overrides[get_transit_service] = (
            lambda: transit_service(FakeEphemeris(error=ProviderError("down")))
        )
        natal = make_chart()

        response = self.client.post(
            "/api/v1/transits",
            json={"natal_chart": natal.model_dump(mode="json")},
        )

        self.assertEqual(response.status_code, 503)

    def test_chiron_without_data_files_is_503(self):
        natal = make_chart()

        with patch.object(settings, "INCLUDE_CHIRON", True), \
                patch.object(settings, "EPHEMERIS_PATH", None):
            fingerprint = self.client.post("/api/v1/fingerprint", json=BIRTH_DETAILS)
            transits = self.client.post(
                "/api/v1/transits",
                json={"natal_chart": natal.model_dump(mode="json")},
            )

        self.assertEqual(fingerprint.status_code, 503)
        self.assertIn("Chiron", fingerprint.json()["detail"])
        self.assertEqual(transits.status_code, 503)


if __name__ == "__main__":
    unittest.main()
