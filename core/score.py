import re
from dataclasses import dataclass
from typing import ClassVar, Tuple

from exceptions.custom_errors import ScoreParseError

"""
Hard/soft score value shared by every problem instance.
"""

_SCORE_PATTERN = re.compile(
    r"^\s*(?:\[(?P<init>-?\d+)\]init/)?(?P<hard>-?\d+)hard/(?P<soft>-?\d+)soft\s*$"
)


@dataclass(frozen=True, order=True)
class HardSoftScore:
    """
    Immutable (init_score, hard, soft) triple ordered lexicographically.

    The init score counts uninitialized planning variables as a negative number,
    so a partially initialized solution always ranks below a fully initialized
    one. Among initialized solutions the hard level decides first, then soft.
    """

    init_score: int = 0
    hard: int = 0
    soft: int = 0

    ZERO: ClassVar["HardSoftScore"]

    @classmethod
    def of(cls, hard: int, soft: int) -> "HardSoftScore":
        return cls(0, hard, soft)

    @classmethod
    def of_uninitialized(cls, init_score: int, hard: int, soft: int) -> "HardSoftScore":
        return cls(init_score, hard, soft)

    @classmethod
    def of_hard(cls, hard: int) -> "HardSoftScore":
        return cls(0, hard, 0)

    @classmethod
    def of_soft(cls, soft: int) -> "HardSoftScore":
        return cls(0, 0, soft)

    @classmethod
    def parse(cls, text: str) -> "HardSoftScore":
        """Parse the `[-2]init/-1hard/-752soft` form produced by `str()`."""
        match = _SCORE_PATTERN.match(text)
        if match is None:
            raise ScoreParseError(
                f"The score ({text!r}) does not follow the pattern [<init>]init/<hard>hard/<soft>soft."
            )
        init = match.group("init")
        return cls(
            int(init) if init is not None else 0,
            int(match.group("hard")),
            int(match.group("soft")),
        )

    @property
    def is_solution_initialized(self) -> bool:
        return self.init_score == 0

    @property
    def is_feasible(self) -> bool:
        return self.is_solution_initialized and self.hard >= 0

    def with_init_score(self, init_score: int) -> "HardSoftScore":
        return HardSoftScore(init_score, self.hard, self.soft)

    def to_level_numbers(self) -> Tuple[int, int]:
        return (self.hard, self.soft)

    def __add__(self, other: "HardSoftScore") -> "HardSoftScore":
        return HardSoftScore(
            self.init_score + other.init_score,
            self.hard + other.hard,
            self.soft + other.soft,
        )

    def __sub__(self, other: "HardSoftScore") -> "HardSoftScore":
        return HardSoftScore(
            self.init_score - other.init_score,
            self.hard - other.hard,
            self.soft - other.soft,
        )

    def __neg__(self) -> "HardSoftScore":
        return HardSoftScore(-self.init_score, -self.hard, -self.soft)

    def __str__(self) -> str:
        levels = f"{self.hard}hard/{self.soft}soft"
        if self.init_score == 0:
            return levels
        return f"[{self.init_score}]init/{levels}"


HardSoftScore.ZERO = HardSoftScore()
