from typing import Dict, Mapping

from core.calculator import EasyScoreCalculator
from core.contribution import Contribution, ContributionScoreCalculator
from core.score import HardSoftScore
from domain.election import Candidate, Election, FederalState

"""
Scoring rules for the election problem.

Hard: the tracked candidate must collect at least `winning_threshold` electoral
votes; below it the hard score is the shortfall, at or above it the hard score
is 0.
Soft: minimise the number of voters the tracked candidate needs to convince.
"""

VOTES = "votes"
SUPPORTERS = "supporters"


def election_score(votes: int, supporters: int, threshold: int, init_score: int = 0) -> HardSoftScore:
    hard = min(0, votes - threshold)
    return HardSoftScore.of_uninitialized(init_score, hard, -supporters)


class ElectionContribution(Contribution):
    aggregate_names = (VOTES, SUPPORTERS)

    def __init__(self, winning_threshold: int, tracked: Candidate = Candidate.GAMER):
        self.winning_threshold = winning_threshold
        self.tracked = tracked

    def contribution(self, federal_state: FederalState) -> Dict[str, int]:
        if federal_state.winning_candidate is not self.tracked:
            return {}
        return {
            VOTES: federal_state.electoral_votes,
            SUPPORTERS: federal_state.minimum_majority_population,
        }

    def score(self, aggregates: Mapping[str, int], init_score: int) -> HardSoftScore:
        return election_score(
            aggregates[VOTES], aggregates[SUPPORTERS], self.winning_threshold, init_score
        )


class ElectionIncrementalScoreCalculator(ContributionScoreCalculator):
    def __init__(self, winning_threshold: int, tracked: Candidate = Candidate.GAMER):
        super().__init__(ElectionContribution(winning_threshold, tracked))

    @classmethod
    def for_election(cls, election: Election) -> "ElectionIncrementalScoreCalculator":
        return cls(election.winning_threshold)


class ElectionEasyScoreCalculator(EasyScoreCalculator):
    def __init__(self, tracked: Candidate = Candidate.GAMER):
        self.tracked = tracked

    def calculate_score(self, election: Election, init_score: int = 0) -> HardSoftScore:
        won = [s for s in election.federal_states if s.winning_candidate is self.tracked]
        votes = sum(s.electoral_votes for s in won)
        supporters = sum(s.minimum_majority_population for s in won)
        return election_score(votes, supporters, election.winning_threshold, init_score)
