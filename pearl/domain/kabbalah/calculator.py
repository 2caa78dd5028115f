from datetime import date
from typing import List

from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.kabbalah.data import LETTER_VALUES, SEPHIROT, SOUL_CORRECTIONS
from pearl.domain.kabbalah.schemas import (
    KabbalahProfile,
    Sephirah,
    SoulCorrection,
    TreePosition,
)


class KabbalahCalculator:
    """
    Maps birth data and name onto the Tree of Life.

    - Soul correction comes from the digit-reduced birth date
    - Birth sephirah comes from the month
    - Tree activations mix the name value with the birth day and month
    """

    calculation_version = "v1"

    def calculate_profile(self, birth_date: date, name: str) -> KabbalahProfile:
        if not name or not name.strip():
            raise InvalidBirthDataError("Name is required for a Kabbalah profile")

        soul_correction = self.soul_correction(
            self.soul_correction_number(birth_date)
        )
        birth_sephirah = SEPHIROT[(birth_date.month - 1) % 10]

        positions = self.tree_positions(
            name_value=self.name_value(name),
            day=birth_date.day,
            month=birth_date.month,
        )

        return KabbalahProfile(
            soul_correction=soul_correction,
            birth_sephirah=birth_sephirah,
            tree_of_life_positions=positions,
            tikkun_path=self.tikkun_path(soul_correction, birth_sephirah),
        )

    # ─────────────────────────────────────────────
    # Soul correction
    # ─────────────────────────────────────────────

    def soul_correction_number(self, birth_date: date) -> int:
        total = (
            self._reduce_to_single(birth_date.day)
            + self._reduce_to_single(birth_date.month)
            + self._reduce_to_single(birth_date.year)
        )
        return ((total - 1) % 72) + 1

    @staticmethod
    def soul_correction(number: int) -> SoulCorrection:
        return SOUL_CORRECTIONS[(number - 1) % len(SOUL_CORRECTIONS)]

    # ─────────────────────────────────────────────
    # Tree of Life
    # ─────────────────────────────────────────────

    @staticmethod
    def name_value(name: str) -> int:
        return sum(LETTER_VALUES.get(ch, 0) for ch in name.lower())

    @staticmethod
    def tree_positions(name_value: int, day: int, month: int) -> List[TreePosition]:
        positions = []
        for sephirah in SEPHIROT:
            seed = ((name_value + day * sephirah.position + month) % 100) / 100.0
            positions.append(
                TreePosition(
                    sephirah_name=sephirah.name,
                    activation=max(0.1, min(1.0, seed)),
                    description=sephirah.quality,
                )
            )
        return positions

    @staticmethod
    def tikkun_path(soul_correction: SoulCorrection, sephirah: Sephirah) -> str:
        return (
            f"Your soul correction of {soul_correction.name} invites you through "
            f"the gateway of {sephirah.name} ({sephirah.meaning}). "
            f"The work of your tikkun is {soul_correction.correction.lower()}."
        )

    @staticmethod
    def _reduce_to_single(n: int) -> int:
        num = abs(n)
        while num > 9:
            num = sum(int(d) for d in str(num))
        return num
