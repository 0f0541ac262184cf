import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from core.score import HardSoftScore
from core.solution import PlanningSolution, planning_variables
from exceptions.custom_errors import ScoreProtocolError

logger = logging.getLogger(__name__)

"""
This module contains the move notification protocol shared by all incremental score calculators.

A search driver brackets every mutation with a before/after pair:

    calculator.before_variable_changed(state, "winning_candidate")
    state.winning_candidate = Candidate.GAMER
    calculator.after_variable_changed(state, "winning_candidate")
    score = calculator.calculate_score()

Subclasses only implement how one entity is inserted into and retracted from
their running aggregates, and how the score is derived from those aggregates.
"""


class CalculatorState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


@dataclass
class PendingChange:
    """Token held between before_variable_changed and after_variable_changed."""

    entity: Any
    variable_name: str


class IncrementalScoreCalculator(ABC):
    """
    Keeps a score up to date from before/after change notifications.

    Invariant: after `reset_working_solution` and after every completed
    notification pair, the aggregates equal the sum of the contributions of all
    entities currently in the solution under their current variable values.

    Misuse of the protocol raises `ScoreProtocolError`. The aggregates are
    undefined afterwards; the driver must call `reset_working_solution` again
    or discard the calculator.
    """

    def __init__(self):
        self.state = CalculatorState.UNINITIALIZED
        self._pending: Optional[PendingChange] = None
        # id(entity) -> (entity, variable values at insert time)
        self._contributing: Dict[int, Tuple[Any, Tuple[Any, ...]]] = {}

    # ------------------------------------------------------------------
    # Protocol
    # ------------------------------------------------------------------
    def reset_working_solution(self, solution: PlanningSolution) -> None:
        """Rebuild all aggregates from scratch. The only O(n) operation."""
        # stays unusable if an insert below fails
        self.state = CalculatorState.UNINITIALIZED
        self._pending = None
        self._contributing = {}
        self._reset_aggregates()
        for entity in solution.get_entities():
            self._do_insert(entity)
        self.state = CalculatorState.READY
        logger.info(
            f"{type(self).__name__} reset with {len(self._contributing)} entities."
        )

    def before_entity_added(self, entity: Any) -> None:
        self._check_idle("before_entity_added")

    def after_entity_added(self, entity: Any) -> None:
        self._check_idle("after_entity_added")
        self._do_insert(entity)

    def before_variable_changed(self, entity: Any, variable_name: str) -> None:
        self._check_ready("before_variable_changed")
        if self._pending is not None:
            raise ScoreProtocolError(
                f"before_variable_changed({entity!r}, {variable_name!r}) called while the change of "
                f"{self._pending.entity!r}.{self._pending.variable_name} is still pending."
            )
        self._do_retract(entity)
        self._pending = PendingChange(entity, variable_name)

    def after_variable_changed(self, entity: Any, variable_name: str) -> None:
        self._check_ready("after_variable_changed")
        pending = self._pending
        if (
            pending is None
            or pending.entity is not entity
            or pending.variable_name != variable_name
        ):
            raise ScoreProtocolError(
                f"after_variable_changed({entity!r}, {variable_name!r}) has no matching "
                f"before_variable_changed."
            )
        self._pending = None
        self._do_insert(entity)

    def before_entity_removed(self, entity: Any) -> None:
        self._check_idle("before_entity_removed")
        self._do_retract(entity)

    def after_entity_removed(self, entity: Any) -> None:
        self._check_idle("after_entity_removed")

    def calculate_score(self, init_score: int = 0) -> HardSoftScore:
        """Derive the score from the current aggregates in O(1). No side effects."""
        self._check_idle("calculate_score")
        return self._score(init_score)

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------
    def _check_ready(self, operation: str) -> None:
        if self.state is not CalculatorState.READY:
            raise ScoreProtocolError(
                f"{operation} called before reset_working_solution."
            )

    def _check_idle(self, operation: str) -> None:
        self._check_ready(operation)
        if self._pending is not None:
            raise ScoreProtocolError(
                f"{operation} called while the change of {self._pending.entity!r}."
                f"{self._pending.variable_name} is still pending."
            )

    def _do_insert(self, entity: Any) -> None:
        key = id(entity)
        if key in self._contributing:
            raise ScoreProtocolError(f"Entity {entity!r} is already contributing.")
        self._insert(entity)
        self._contributing[key] = (entity, self._variable_values(entity))

    def _do_retract(self, entity: Any) -> None:
        record = self._contributing.get(id(entity))
        if record is None or record[0] is not entity:
            raise ScoreProtocolError(f"Entity {entity!r} is not contributing.")
        if record[1] != self._variable_values(entity):
            raise ScoreProtocolError(
                f"Entity {entity!r} changed from {record[1]!r} to "
                f"{self._variable_values(entity)!r} without before_variable_changed."
            )
        self._retract(entity)
        del self._contributing[id(entity)]

    @staticmethod
    def _variable_values(entity: Any) -> Tuple[Any, ...]:
        return tuple(getattr(entity, name) for name in planning_variables(type(entity)))

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------
    @abstractmethod
    def _reset_aggregates(self) -> None:
        """Set every running aggregate back to its empty value."""

    @abstractmethod
    def _insert(self, entity: Any) -> None:
        """Add the entity's contribution under its current variable value."""

    @abstractmethod
    def _retract(self, entity: Any) -> None:
        """Remove the entity's contribution under its current variable value."""

    @abstractmethod
    def _score(self, init_score: int) -> HardSoftScore:
        pass

    @abstractmethod
    def aggregate_snapshot(self) -> Dict[str, Any]:
        """Return a copy of the running aggregates, for assertions and debugging."""


class EasyScoreCalculator(ABC):
    """Calculates the score of a whole solution in one pass, without any state."""

    @abstractmethod
    def calculate_score(self, solution: PlanningSolution, init_score: int = 0) -> HardSoftScore:
        pass
