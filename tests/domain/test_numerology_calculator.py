import unittest
from datetime import date

from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.numerology.calculator import NumerologyCalculator, reduce_number


AS_OF = date(2026, 1, 1)


class TestReduceNumber(unittest.TestCase):
    def test_reduces_to_single_digit(self):
        self.assertEqual(reduce_number(1990), 1)
        self.assertEqual(reduce_number(27), 9)

    def test_keeps_master_numbers(self):
        self.assertEqual(reduce_number(29), 11)
        self.assertEqual(reduce_number(22), 22)
        self.assertEqual(reduce_number(22, keep_master=False), 4)


class TestNumerologyCalculator(unittest.TestCase):
    def setUp(self):
        self.calculator = NumerologyCalculator()
        self.profile = self.calculator.calculate_profile(
            date(1990, 3, 15), "Maya Rivers", as_of=AS_OF
        )

    def test_life_path(self):
        self.assertEqual(self.profile.life_path.value, 1)
        self.assertFalse(self.profile.life_path.is_master_number)
        self.assertEqual(
            self.profile.life_path.keywords,
            ["Leadership", "Independence", "Innovation", "Courage"],
        )

    def test_master_life_paths(self):
        eleven = self.calculator.calculate_profile(date(2007, 1, 1), "Test User", as_of=AS_OF)
        twenty_two = self.calculator.calculate_profile(date(1991, 11, 9), "Test User", as_of=AS_OF)

        self.assertEqual(eleven.life_path.value, 11)
        self.assertTrue(eleven.life_path.is_master_number)
        self.assertEqual(twenty_two.life_path.value, 22)
        self.assertEqual(twenty_two.life_path.keywords[0], "Vision")

    def test_name_numbers(self):
        self.assertEqual(self.profile.expression.value, 5)
        self.assertEqual(self.profile.soul_urge.value, 7)
        self.assertEqual(self.profile.personality.value, 7)
        self.assertEqual(self.profile.expression.type, "Expression")
        self.assertEqual(self.profile.soul_urge.type, "Soul Urge")

    def test_birthday(self):
        self.assertEqual(self.profile.birthday.value, 6)
        late = self.calculator.calculate_profile(date(1990, 3, 27), "Test", as_of=AS_OF)
        self.assertEqual(late.birthday.value, 9)

    def test_personal_year_depends_on_as_of(self):
        self.assertEqual(self.profile.personal_year, 1)
        self.assertEqual(self.profile.personal_year_theme, "New beginnings and fresh starts")

        later = self.calculator.calculate_profile(
            date(1990, 3, 15), "Maya Rivers", as_of=date(2028, 6, 1)
        )
        self.assertEqual(later.personal_year, 3)

    def test_pinnacles(self):
        numbers = [p.number for p in self.profile.pinnacles]
        self.assertEqual(numbers, [9, 7, 7, 4])

        ages = [(p.start_age, p.end_age) for p in self.profile.pinnacles]
        self.assertEqual(ages, [(0, 35), (36, 44), (45, 53), (54, None)])

    def test_challenges(self):
        self.assertEqual([c.number for c in self.profile.challenges], [3, 5, 2, 2])
        for challenge in self.profile.challenges:
            self.assertTrue(challenge.meaning)

    def test_deterministic(self):
        again = self.calculator.calculate_profile(date(1990, 3, 15), "Maya Rivers", as_of=AS_OF)
        self.assertEqual(self.profile, again)

    def test_empty_name_rejected(self):
        with self.assertRaises(InvalidBirthDataError):
            self.calculator.calculate_profile(date(1990, 3, 15), "  ", as_of=AS_OF)


if __name__ == "__main__":
    unittest.main()
