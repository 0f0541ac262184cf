import logging
from typing import Any, Optional

from core.calculator import EasyScoreCalculator, IncrementalScoreCalculator
from core.score import HardSoftScore
from core.solution import PlanningSolution, planning_variables
from exceptions.custom_errors import ScoreCorruptionError

logger = logging.getLogger(__name__)


class ScoreDirector:
    """
    Applies mutations to a working solution and keeps its incremental calculator informed.

    Every mutation goes through this class so that the before/after hooks are
    always called in the right order around it. The number of unassigned
    planning variables is tracked alongside, so `calculate_score` stays O(1).
    An optional easy calculator is used to verify the incremental score
    against a full recalculation.
    """

    def __init__(
        self,
        solution: PlanningSolution,
        incremental: IncrementalScoreCalculator,
        easy: Optional[EasyScoreCalculator] = None,
    ):
        self.solution = solution
        self.incremental = incremental
        self.easy = easy
        self.reset()

    def reset(self) -> None:
        self.incremental.reset_working_solution(self.solution)
        self._uninitialized = self.solution.count_uninitialized()

    def change_variable(self, entity: Any, variable_name: str, value: Any) -> None:
        logger.debug(f"Change {entity!r}.{variable_name} -> {value!r}")
        old_value = getattr(entity, variable_name)
        self.incremental.before_variable_changed(entity, variable_name)
        try:
            setattr(entity, variable_name, value)
        except Exception:
            # the rejected value was never stored, put the entity back unchanged
            self.incremental.after_variable_changed(entity, variable_name)
            raise
        self.incremental.after_variable_changed(entity, variable_name)
        if old_value is None and value is not None:
            self._uninitialized -= 1
        elif old_value is not None and value is None:
            self._uninitialized += 1

    def add_entity(self, entity: Any) -> None:
        logger.debug(f"Add {entity!r}")
        self.incremental.before_entity_added(entity)
        self.incremental.after_entity_added(entity)
        self.solution.get_entities().append(entity)
        self._uninitialized += self._count_unassigned(entity)

    def remove_entity(self, entity: Any) -> None:
        logger.debug(f"Remove {entity!r}")
        self.incremental.before_entity_removed(entity)
        entities = self.solution.get_entities()
        # by identity, entities may compare equal by value
        index = next(i for i, e in enumerate(entities) if e is entity)
        del entities[index]
        self.incremental.after_entity_removed(entity)
        self._uninitialized -= self._count_unassigned(entity)

    @staticmethod
    def _count_unassigned(entity: Any) -> int:
        return sum(
            1 for name in planning_variables(type(entity)) if getattr(entity, name) is None
        )

    def calculate_score(self) -> HardSoftScore:
        """Score the working solution and store it on `solution.score`."""
        score = self.incremental.calculate_score(-self._uninitialized)
        self.solution.score = score
        return score

    def assert_score_from_scratch(self) -> HardSoftScore:
        """Compare the incremental score with a full recalculation by the easy calculator."""
        if self.easy is None:
            raise ValueError("No easy score calculator configured for this director.")
        init_score = -self.solution.count_uninitialized()
        incremental_score = self.incremental.calculate_score(-self._uninitialized)
        scratch_score = self.easy.calculate_score(self.solution, init_score)
        if incremental_score != scratch_score:
            logger.error(
                f"Score corruption: incremental {incremental_score} != from scratch {scratch_score}"
            )
            raise ScoreCorruptionError(
                f"Score corruption: the incremental score ({incremental_score}) is not the "
                f"score calculated from scratch ({scratch_score}).\n"
                f"Aggregates: {self.incremental.aggregate_snapshot()}"
            )
        return incremental_score
