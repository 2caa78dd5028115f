import unittest
from datetime import date

from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.kabbalah.calculator import KabbalahCalculator
from pearl.domain.kabbalah.data import SEPHIROT, SOUL_CORRECTIONS


class TestKabbalahCalculator(unittest.TestCase):
    def setUp(self):
        self.calculator = KabbalahCalculator()

    def test_tables_complete(self):
        self.assertEqual(len(SOUL_CORRECTIONS), 72)
        self.assertEqual([s.number for s in SOUL_CORRECTIONS], list(range(1, 73)))
        self.assertEqual(len(SEPHIROT), 10)

    def test_soul_correction_from_reduced_date(self):
        # 15 -> 6, 3 -> 3, 1990 -> 1
        profile = self.calculator.calculate_profile(date(1990, 3, 15), "Maya Rivers")

        self.assertEqual(profile.soul_correction.number, 10)
        self.assertEqual(profile.soul_correction.name, "Looks Can Kill")

    def test_soul_correction_number_stays_in_range(self):
        for year in (1900, 1969, 1999, 2024):
            for month in (1, 6, 9, 12):
                number = self.calculator.soul_correction_number(date(year, month, 28))
                self.assertGreaterEqual(number, 1)
                self.assertLessEqual(number, 72)

    def test_birth_sephirah_from_month(self):
        march = self.calculator.calculate_profile(date(1990, 3, 15), "Maya Rivers")
        november = self.calculator.calculate_profile(date(1990, 11, 15), "Maya Rivers")

        self.assertEqual(march.birth_sephirah.name, "Binah")
        # Eleven months wrap back onto the first sephirah
        self.assertEqual(november.birth_sephirah.name, "Keter")

    def test_tree_positions(self):
        profile = self.calculator.calculate_profile(date(1990, 3, 15), "Maya Rivers")

        self.assertEqual(len(profile.tree_of_life_positions), 10)
        keter = profile.tree_of_life_positions[0]
        self.assertEqual(keter.sephirah_name, "Keter")
        # name value 1436, (1436 + 15 + 3) % 100
        self.assertAlmostEqual(keter.activation, 0.54)

        for pos in profile.tree_of_life_positions:
            self.assertGreaterEqual(pos.activation, 0.1)
            self.assertLessEqual(pos.activation, 1.0)

    def test_activation_floor(self):
        positions = self.calculator.tree_positions(name_value=96, day=1, month=3)
        self.assertEqual(positions[0].activation, 0.1)

    def test_tikkun_path_mentions_correction(self):
        profile = self.calculator.calculate_profile(date(1990, 3, 15), "Maya Rivers")

        self.assertIn("Looks Can Kill", profile.tikkun_path)
        self.assertIn("Binah", profile.tikkun_path)

    def test_empty_name_rejected(self):
        with self.assertRaises(InvalidBirthDataError):
            self.calculator.calculate_profile(date(1990, 3, 15), "")


if __name__ == "__main__":
    unittest.main()
