import pytest

from calculators.election import ElectionEasyScoreCalculator, ElectionIncrementalScoreCalculator
from core.calculator import EasyScoreCalculator
from core.director import ScoreDirector
from core.score import HardSoftScore
from domain.election import Candidate, FederalState
from exceptions.custom_errors import ScoreCorruptionError, ScoreProtocolError, ValueRangeError


class AlwaysZeroScoreCalculator(EasyScoreCalculator):
    def calculate_score(self, solution, init_score=0):
        return HardSoftScore.ZERO


@pytest.fixture
def director(election):
    return ScoreDirector(
        election,
        ElectionIncrementalScoreCalculator.for_election(election),
        ElectionEasyScoreCalculator(),
    )


def test_calculate_score_stores_the_score_on_the_solution(election, director):
    assert election.score is None
    score = director.calculate_score()
    assert score == HardSoftScore.of(-1, -752)
    assert election.score is score


def test_change_variable_tracks_uninitialized_variables(election, director):
    state = election.federal_states[0]
    director.change_variable(state, "winning_candidate", None)
    assert director.calculate_score() == HardSoftScore(-1, -4, -251)

    director.change_variable(state, "winning_candidate", None)
    assert director.calculate_score().init_score == -1

    director.change_variable(state, "winning_candidate", Candidate.NORMAL)
    assert director.calculate_score() == HardSoftScore.of(-4, -251)
    director.assert_score_from_scratch()


def test_add_and_remove_entity(election, director):
    newcomer = FederalState("D", 4000, 4)
    director.add_entity(newcomer)
    assert election.federal_states[-1] is newcomer
    assert director.calculate_score() == HardSoftScore(-1, -1, -752)

    director.change_variable(newcomer, "winning_candidate", Candidate.GAMER)
    assert director.calculate_score() == HardSoftScore.of(0, -(752 + 2001))

    director.remove_entity(newcomer)
    assert newcomer not in election.federal_states
    assert director.calculate_score() == HardSoftScore.of(-1, -752)
    director.assert_score_from_scratch()


def test_remove_entity_removes_by_identity(election, director):
    twin = FederalState("A", 1000, 3, Candidate.GAMER)
    director.add_entity(twin)
    director.remove_entity(twin)
    assert [s.name for s in election.federal_states] == ["A", "B", "C"]
    assert election.federal_states[0] is not twin


def test_reset_picks_up_direct_edits(election, director):
    election.federal_states[1].winning_candidate = Candidate.GAMER
    director.reset()
    assert director.calculate_score() == HardSoftScore.of(0, -(752 + 1001))


def test_corruption_is_reported_with_the_aggregates(election):
    director = ScoreDirector(
        election,
        ElectionIncrementalScoreCalculator.for_election(election),
        AlwaysZeroScoreCalculator(),
    )
    with pytest.raises(ScoreCorruptionError, match="supporters"):
        director.assert_score_from_scratch()


def test_verification_needs_an_easy_calculator(election):
    director = ScoreDirector(election, ElectionIncrementalScoreCalculator.for_election(election))
    assert director.calculate_score() == HardSoftScore.of(-1, -752)
    with pytest.raises(ValueError):
        director.assert_score_from_scratch()


def test_rejected_value_leaves_the_entity_and_score_unchanged(election, director):
    state = election.federal_states[1]
    with pytest.raises(ValueRangeError):
        director.change_variable(state, "winning_candidate", "GAMER")
    assert state.winning_candidate is Candidate.NORMAL
    assert director.calculate_score() == HardSoftScore.of(-1, -752)

    director.change_variable(state, "winning_candidate", Candidate.GAMER)
    assert director.assert_score_from_scratch() == HardSoftScore.of(0, -(752 + 1001))


def test_adding_an_entity_twice_is_rejected_without_touching_the_solution(election, director):
    first = election.federal_states[0]
    with pytest.raises(ScoreProtocolError):
        director.add_entity(first)
    assert [s.name for s in election.federal_states] == ["A", "B", "C"]
    assert director.calculate_score() == HardSoftScore.of(-1, -752)

    director.reset()
    assert director.assert_score_from_scratch() == HardSoftScore.of(-1, -752)
