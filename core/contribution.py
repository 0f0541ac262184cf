from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Mapping, Tuple

from core.calculator import IncrementalScoreCalculator
from core.score import HardSoftScore


class Contribution(ABC):
    """
    Per-problem scoring rule for calculators whose aggregates are plain sums.

    `contribution` returns what one entity adds to each named sum under its
    current variable value; `score` turns the sums into a score.
    """

    aggregate_names: ClassVar[Tuple[str, ...]] = ()

    @abstractmethod
    def contribution(self, entity: Any) -> Mapping[str, int]:
        pass

    @abstractmethod
    def score(self, aggregates: Mapping[str, int], init_score: int) -> HardSoftScore:
        pass


class ContributionScoreCalculator(IncrementalScoreCalculator):
    """Incremental calculator that adds and subtracts a `Contribution` into named integer sums."""

    def __init__(self, contribution: Contribution):
        super().__init__()
        self.contribution = contribution
        self.aggregates: Dict[str, int] = {}

    def _reset_aggregates(self) -> None:
        self.aggregates = {name: 0 for name in self.contribution.aggregate_names}

    def _insert(self, entity: Any) -> None:
        for name, value in self.contribution.contribution(entity).items():
            self.aggregates[name] += value

    def _retract(self, entity: Any) -> None:
        for name, value in self.contribution.contribution(entity).items():
            self.aggregates[name] -= value

    def _score(self, init_score: int) -> HardSoftScore:
        return self.contribution.score(self.aggregates, init_score)

    def aggregate_snapshot(self) -> Dict[str, int]:
        return dict(self.aggregates)
