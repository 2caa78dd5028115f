import unittest

from pearl.domain.astrology.schemas import Planet, ZodiacSign
from pearl.domain.errors import LifePurposeError
from pearl.domain.life_purpose.calculator import LifePurposeCalculator
from tests.fixtures import FIXED_NOW, fixed_clock, make_chart


class TestLifePurposeCalculator(unittest.TestCase):
    def setUp(self):
        self.calculator = LifePurposeCalculator(clock=fixed_clock)

    def test_full_chart(self):
        chart = make_chart(midheaven=ZodiacSign.TAURUS)

        profile = self.calculator.generate_life_purpose(chart, "Maya")

        self.assertEqual(profile.generated_at, FIXED_NOW)
        self.assertEqual(
            profile.headline,
            "Maya, your purpose lives at the intersection of Aries vitality "
            "and Aquarius direction.",
        )
        self.assertIn("Saturn in Capricorn", profile.leadership_style)
        self.assertIn("building tangible beauty", profile.career_alignment)

        source = profile.source_data
        self.assertEqual(source.sun_sign, "Aries")
        self.assertEqual(source.north_node_sign, "Aquarius")
        self.assertEqual(source.south_node_sign, "Leo")
        self.assertEqual(source.midheaven_sign, "Taurus")
        self.assertEqual(source.saturn_sign, "Capricorn")

    def test_without_node_and_saturn(self):
        chart = make_chart({Planet.SUN: 5.0, Planet.MOON: 95.0})

        profile = self.calculator.generate_life_purpose(chart, "")

        self.assertTrue(profile.headline.startswith("Your purpose lives"))
        self.assertEqual(profile.source_data.north_node_sign, "Unknown")
        self.assertIsNone(profile.source_data.south_node_sign)
        self.assertEqual(
            profile.long_term_path,
            "Your long-term mastery unfolds through patience and dedication to your craft.",
        )

    def test_requires_sun(self):
        chart = make_chart({Planet.MOON: 95.0, Planet.SATURN: 285.0})

        with self.assertRaises(LifePurposeError):
            self.calculator.generate_life_purpose(chart, "Maya")


if __name__ == "__main__":
    unittest.main()
