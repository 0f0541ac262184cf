from enum import Enum
from typing import List, Optional

from core.solution import PlanningSolution, PlanningVariable
from utils.constants import WINNING_THRESHOLD


class Candidate(Enum):
    NORMAL = "Normal candidate"
    # The candidate that games the system to win
    GAMER = "Gamer candidate"


class FederalState:
    """A state whose electoral votes go entirely to the candidate winning it."""

    winning_candidate = PlanningVariable(value_range=Candidate)

    def __init__(
        self,
        name: str,
        population: int,
        electoral_votes: int,
        winning_candidate: Optional[Candidate] = None,
    ):
        self.name = name
        self.population = population
        self.electoral_votes = electoral_votes
        self.winning_candidate = winning_candidate

    @property
    def minimum_majority_population(self) -> int:
        """Voters needed to carry the state: one more than half."""
        return self.population // 2 + 1

    def __repr__(self):
        return f"FederalState({self.name!r})"


class Election(PlanningSolution):
    entity_collection = "federal_states"

    def __init__(self, federal_states: List[FederalState], winning_threshold: int = WINNING_THRESHOLD):
        super().__init__()
        self.federal_states = federal_states
        self.winning_threshold = winning_threshold

    @property
    def total_electoral_votes(self) -> int:
        return sum(s.electoral_votes for s in self.federal_states)
