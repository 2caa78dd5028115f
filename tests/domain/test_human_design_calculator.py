import unittest
from datetime import date

from pearl.domain.human_design.calculator import LUNAR_AUTHORITY, HumanDesignCalculator
from pearl.domain.human_design.schemas import HDCenter, HumanDesignType


class TestHumanDesignType(unittest.TestCase):
    def test_type_rules(self):
        determine = HumanDesignCalculator.determine_type

        self.assertEqual(
            determine({HDCenter.SACRAL, HDCenter.THROAT, HDCenter.ROOT}),
            HumanDesignType.MANIFESTING_GENERATOR,
        )
        self.assertEqual(determine({HDCenter.SACRAL, HDCenter.ROOT}), HumanDesignType.GENERATOR)
        self.assertEqual(determine({HDCenter.THROAT, HDCenter.HEART}), HumanDesignType.MANIFESTOR)
        self.assertEqual(determine({HDCenter.THROAT, HDCenter.G}), HumanDesignType.PROJECTOR)
        self.assertEqual(determine(set()), HumanDesignType.REFLECTOR)

    def test_strategies(self):
        self.assertEqual(HumanDesignType.GENERATOR.strategy, "Wait to Respond")
        self.assertEqual(HumanDesignType.PROJECTOR.strategy, "Wait for the Invitation")
        self.assertEqual(HumanDesignType.REFLECTOR.strategy, "Wait a Lunar Cycle")

    def test_authority_precedence(self):
        determine = HumanDesignCalculator.determine_authority

        self.assertEqual(
            determine({HDCenter.SACRAL, HDCenter.SOLAR_PLEXUS}),
            "Emotional (Solar Plexus)",
        )
        self.assertEqual(determine({HDCenter.SACRAL, HDCenter.SPLEEN}), "Sacral")
        self.assertEqual(determine(set()), LUNAR_AUTHORITY)


class TestHumanDesignCalculator(unittest.TestCase):
    def setUp(self):
        self.calculator = HumanDesignCalculator()

    def test_personality_gates(self):
        # Day 74 of the year sits in the 13th gate slot, Earth opposite
        gates = self.calculator.personality_gates(date(1990, 3, 15))

        self.assertEqual(gates[0], 21)
        self.assertEqual(gates[1], 48)
        self.assertEqual(len(gates), 5)

    def test_profile_lines(self):
        self.assertEqual(HumanDesignCalculator.profile_for(date(1990, 3, 15)), "1/4")

    def test_profile_is_consistent(self):
        profile = self.calculator.calculate(date(1990, 3, 15))

        self.assertEqual(profile.strategy, profile.type.strategy)
        self.assertEqual(
            set(profile.defined_centers) | set(profile.undefined_centers),
            set(HDCenter),
        )
        self.assertFalse(set(profile.defined_centers) & set(profile.undefined_centers))

    def test_deterministic(self):
        first = self.calculator.calculate(date(1985, 7, 22))
        second = self.calculator.calculate(date(1985, 7, 22))

        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
