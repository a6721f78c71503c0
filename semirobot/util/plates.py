"""
Field signal decoding.

The field management system sends a three letter message such as ``LRL``
describing which side of the nearest switch, the scale and the farthest
switch belongs to our alliance, seen from our driver station.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class PlateSide(str, Enum):
    """Сторона плиты: левая, правая или неизвестная."""

    LEFT = "L"
    RIGHT = "R"
    INVALID = "?"

    @classmethod
    def from_letter(cls, letter: str) -> "PlateSide":
        """L и R распознаются, всё остальное INVALID."""
        if letter == "L":
            return cls.LEFT
        if letter == "R":
            return cls.RIGHT
        return cls.INVALID

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlateAssignment:
    """
    Immutable (nearest, scale, farthest) triple, nearest to our wall first.

    Build instances through :meth:`parse`; the canonical values returned for
    compliant signals are shared module constants and can be compared with ``is``.
    """

    nearest: PlateSide
    scale: PlateSide
    farthest: PlateSide

    @classmethod
    def _from_letters(cls, letters: str) -> "PlateAssignment":
        return cls(*(PlateSide.from_letter(letter) for letter in letters[:3]))

    @classmethod
    def parse(cls, signal: str | None) -> "PlateAssignment":
        """
        Decode a field signal.

        Empty or short input means "no data yet" and yields ALL_INVALID without
        a warning. Anything that is not one of the four canonical messages is
        mapped letter by letter and reported as non-compliant.
        """
        if signal is None or len(signal) < 3:
            return ALL_INVALID

        upper = signal.upper()
        if upper == str(ALL_INVALID):
            return ALL_INVALID
        for state in VALID_STATES:
            if str(state) == upper:
                return state

        logger.warning("Non-compliant field signal: %r", signal)
        assignment = cls._from_letters(upper)
        if PlateSide.INVALID in assignment.sides:
            logger.warning("Found unknown plate sides: %s", assignment)
        return assignment

    @property
    def sides(self) -> tuple[PlateSide, PlateSide, PlateSide]:
        return (self.nearest, self.scale, self.farthest)

    @property
    def is_compliant(self) -> bool:
        """True только для четырёх значений из реального матча."""
        return any(self == state for state in VALID_STATES)

    def __str__(self) -> str:
        return "".join(side.value for side in self.sides)


# Used when there is no field signal, e.g. practice runs
ALL_INVALID = PlateAssignment(PlateSide.INVALID, PlateSide.INVALID, PlateSide.INVALID)

VALID_STATES: tuple[PlateAssignment, ...] = tuple(
    PlateAssignment._from_letters(letters) for letters in ("LLL", "RRR", "LRL", "RLR")
)
