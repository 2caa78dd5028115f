from datetime import date
from typing import List, Optional

from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.numerology.meanings import (
    CHALLENGE_MEANINGS,
    DEFAULT_KEYWORDS,
    EXPRESSION_MEANINGS,
    KEYWORDS,
    LIFE_PATH_MEANINGS,
    PERSONAL_YEAR_THEMES,
    SOUL_URGE_MEANINGS,
)
from pearl.domain.numerology.schemas import (
    Challenge,
    NumerologyNumber,
    NumerologyProfile,
    Pinnacle,
)


MASTER_NUMBERS = frozenset({11, 22, 33})

VOWELS = frozenset("aeiou")


def reduce_number(n: int, keep_master: bool = True) -> int:
    """
    Digit-sum reduction to a single digit, stopping at 11, 22 and 33
    unless keep_master is False.
    """
    num = abs(n)
    while num > 9 and not (keep_master and num in MASTER_NUMBERS):
        num = sum(int(d) for d in str(num))
    return num


def letter_value(ch: str) -> int:
    # Pythagorean table: a=1 .. i=9, then repeats
    if "a" <= ch <= "z":
        return (ord(ch) - ord("a")) % 9 + 1
    return 0


class NumerologyCalculator:
    """
    Pythagorean numerology from a birth date and full name.
    """

    calculation_version = "v1"

    def calculate_profile(
        self,
        birth_date: date,
        full_name: str,
        as_of: Optional[date] = None,
    ) -> NumerologyProfile:
        if not full_name or not full_name.strip():
            raise InvalidBirthDataError("Full name is required for numerology")

        as_of = as_of or date.today()
        day, month, year = birth_date.day, birth_date.month, birth_date.year

        life_path = self.life_path(day, month, year)
        personal_year = self.personal_year(day, month, as_of)

        return NumerologyProfile(
            life_path=life_path,
            expression=self.expression(full_name),
            soul_urge=self.soul_urge(full_name),
            personality=self.personality(full_name),
            birthday=self.birthday(day),
            personal_year=personal_year,
            personal_year_theme=PERSONAL_YEAR_THEMES.get(
                reduce_number(personal_year, keep_master=False),
                "A unique year of transformation",
            ),
            pinnacles=self.pinnacles(life_path.value, day, month, year),
            challenges=self.challenges(day, month, year),
        )

    # ─────────────────────────────────────────────
    # Core numbers
    # ─────────────────────────────────────────────

    def life_path(self, day: int, month: int, year: int) -> NumerologyNumber:
        total = reduce_number(
            reduce_number(month) + reduce_number(day) + reduce_number(year)
        )
        return NumerologyNumber(
            type="Life Path",
            value=total,
            is_master_number=total in MASTER_NUMBERS,
            meaning=LIFE_PATH_MEANINGS.get(total, "A unique numerological signature."),
            keywords=keywords_for(total),
        )

    def expression(self, name: str) -> NumerologyNumber:
        value = reduce_number(sum(letter_value(ch) for ch in name.lower()))
        return self._name_number(
            "Expression",
            value,
            EXPRESSION_MEANINGS.get(
                reduce_number(value, keep_master=False),
                "Your expression carries a unique signature.",
            ),
        )

    def soul_urge(self, name: str) -> NumerologyNumber:
        value = reduce_number(
            sum(letter_value(ch) for ch in name.lower() if ch in VOWELS)
        )
        return self._name_number(
            "Soul Urge",
            value,
            SOUL_URGE_MEANINGS.get(
                reduce_number(value, keep_master=False),
                "Your soul carries a deep and unique desire.",
            ),
        )

    def personality(self, name: str) -> NumerologyNumber:
        value = reduce_number(
            sum(letter_value(ch) for ch in name.lower() if ch not in VOWELS)
        )
        first_two = keywords_for(reduce_number(value, keep_master=False))[:2]
        return self._name_number(
            "Personality",
            value,
            f"The world sees you through the lens of the number {value}: "
            f"{' and '.join(first_two).lower()}.",
        )

    def birthday(self, day: int) -> NumerologyNumber:
        value = reduce_number(day)
        keywords = keywords_for(value)
        return NumerologyNumber(
            type="Birthday",
            value=value,
            is_master_number=False,
            meaning=f"Born on a {value} day, you carry {keywords[0].lower()} as a natural talent.",
            keywords=keywords[:2],
        )

    @staticmethod
    def personal_year(day: int, month: int, as_of: date) -> int:
        return reduce_number(day + month + reduce_number(as_of.year))

    # ─────────────────────────────────────────────
    # Life periods
    # ─────────────────────────────────────────────

    def pinnacles(self, life_path: int, day: int, month: int, year: int) -> List[Pinnacle]:
        month_r = reduce_number(month)
        day_r = reduce_number(day)
        year_r = reduce_number(year)

        first = reduce_number(month_r + day_r)
        second = reduce_number(day_r + year_r)
        third = reduce_number(first + second)
        fourth = reduce_number(month_r + year_r)

        first_end = 36 - life_path
        spans = [
            (0, first_end),
            (first_end + 1, first_end + 9),
            (first_end + 10, first_end + 18),
            (first_end + 19, None),
        ]

        return [
            Pinnacle(
                period=period,
                number=number,
                meaning=self._period_meaning(number),
                start_age=start,
                end_age=end,
            )
            for period, (number, (start, end)) in enumerate(
                zip([first, second, third, fourth], spans), start=1
            )
        ]

    @staticmethod
    def challenges(day: int, month: int, year: int) -> List[Challenge]:
        month_r = reduce_number(month)
        day_r = reduce_number(day)
        year_r = reduce_number(year)

        first = abs(month_r - day_r)
        second = abs(day_r - year_r)
        third = abs(first - second)
        fourth = abs(month_r - year_r)

        return [
            Challenge(
                period=period,
                number=number,
                meaning=CHALLENGE_MEANINGS.get(
                    reduce_number(number, keep_master=False),
                    "A unique challenge for growth.",
                ),
            )
            for period, number in enumerate([first, second, third, fourth], start=1)
        ]

    # ─────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────

    @staticmethod
    def _name_number(kind: str, value: int, meaning: str) -> NumerologyNumber:
        return NumerologyNumber(
            type=kind,
            value=value,
            is_master_number=value in MASTER_NUMBERS,
            meaning=meaning,
            keywords=keywords_for(reduce_number(value, keep_master=False)),
        )

    @staticmethod
    def _period_meaning(number: int) -> str:
        first_two = keywords_for(reduce_number(number, keep_master=False))[:2]
        return f"A period emphasizing {' and '.join(first_two).lower()}."


def keywords_for(n: int) -> List[str]:
    return list(KEYWORDS.get(n) or KEYWORDS.get(reduce_number(n)) or DEFAULT_KEYWORDS)
