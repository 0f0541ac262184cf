import pytest

from calculators.election import ElectionIncrementalScoreCalculator
from core.calculator import CalculatorState
from core.score import HardSoftScore
from domain.election import Candidate, FederalState
from exceptions.custom_errors import ScoreProtocolError

VARIABLE = "winning_candidate"


@pytest.fixture
def calculator(election):
    calculator = ElectionIncrementalScoreCalculator(election.winning_threshold)
    calculator.reset_working_solution(election)
    return calculator


def test_starts_uninitialized_and_is_ready_after_reset(election):
    calculator = ElectionIncrementalScoreCalculator(6)
    assert calculator.state is CalculatorState.UNINITIALIZED
    with pytest.raises(ScoreProtocolError):
        calculator.calculate_score()
    with pytest.raises(ScoreProtocolError):
        calculator.before_variable_changed(election.federal_states[0], VARIABLE)
    calculator.reset_working_solution(election)
    assert calculator.state is CalculatorState.READY


def test_reset_is_idempotent(election, calculator):
    first = calculator.calculate_score()
    calculator.reset_working_solution(election)
    calculator.reset_working_solution(election)
    assert calculator.calculate_score() == first


def test_calculate_score_is_repeatable(calculator):
    scores = {calculator.calculate_score() for _ in range(5)}
    assert scores == {HardSoftScore.of(-1, -752)}


def test_init_score_is_folded_in(calculator):
    assert calculator.calculate_score(-2) == HardSoftScore(-2, -1, -752)


def test_variable_change_bracketed_by_hooks(election, calculator):
    state = election.federal_states[1]
    calculator.before_variable_changed(state, VARIABLE)
    state.winning_candidate = Candidate.GAMER
    calculator.after_variable_changed(state, VARIABLE)
    assert calculator.calculate_score() == HardSoftScore.of(0, -(752 + 1001))


def test_after_without_before_is_rejected(election, calculator):
    with pytest.raises(ScoreProtocolError):
        calculator.after_variable_changed(election.federal_states[0], VARIABLE)


def test_after_for_another_entity_is_rejected(election, calculator):
    calculator.before_variable_changed(election.federal_states[0], VARIABLE)
    with pytest.raises(ScoreProtocolError):
        calculator.after_variable_changed(election.federal_states[1], VARIABLE)


def test_after_for_another_variable_is_rejected(election, calculator):
    calculator.before_variable_changed(election.federal_states[0], VARIABLE)
    with pytest.raises(ScoreProtocolError):
        calculator.after_variable_changed(election.federal_states[0], "population")


def test_nested_before_is_rejected(election, calculator):
    calculator.before_variable_changed(election.federal_states[0], VARIABLE)
    with pytest.raises(ScoreProtocolError):
        calculator.before_variable_changed(election.federal_states[1], VARIABLE)


def test_score_and_entity_hooks_are_rejected_while_a_change_is_pending(election, calculator):
    calculator.before_variable_changed(election.federal_states[0], VARIABLE)
    with pytest.raises(ScoreProtocolError):
        calculator.calculate_score()
    with pytest.raises(ScoreProtocolError):
        calculator.after_entity_added(FederalState("D", 10, 1))
    with pytest.raises(ScoreProtocolError):
        calculator.before_entity_removed(election.federal_states[2])


def test_mutation_without_before_hook_is_detected(election, calculator):
    state = election.federal_states[1]
    state.winning_candidate = Candidate.GAMER  # no notification
    with pytest.raises(ScoreProtocolError):
        calculator.before_variable_changed(state, VARIABLE)


def test_retracting_a_non_contributing_entity_is_rejected(calculator):
    with pytest.raises(ScoreProtocolError):
        calculator.before_entity_removed(FederalState("D", 10, 1, Candidate.GAMER))


def test_inserting_a_contributing_entity_twice_is_rejected(election, calculator):
    with pytest.raises(ScoreProtocolError):
        calculator.after_entity_added(election.federal_states[0])


def test_before_entity_added_and_after_entity_removed_have_no_effect(election, calculator):
    before = calculator.aggregate_snapshot()
    newcomer = FederalState("D", 10, 1, Candidate.GAMER)
    calculator.before_entity_added(newcomer)
    assert calculator.aggregate_snapshot() == before

    leaving = election.federal_states[0]
    calculator.before_entity_removed(leaving)
    after_retract = calculator.aggregate_snapshot()
    calculator.after_entity_removed(leaving)
    assert calculator.aggregate_snapshot() == after_retract


def test_entity_add_and_remove(calculator):
    newcomer = FederalState("D", 10, 1, Candidate.GAMER)
    calculator.before_entity_added(newcomer)
    calculator.after_entity_added(newcomer)
    assert calculator.calculate_score() == HardSoftScore.of(0, -(752 + 6))

    calculator.before_entity_removed(newcomer)
    calculator.after_entity_removed(newcomer)
    assert calculator.calculate_score() == HardSoftScore.of(-1, -752)


def test_reset_clears_a_pending_change(election, calculator):
    calculator.before_variable_changed(election.federal_states[0], VARIABLE)
    calculator.reset_working_solution(election)
    assert calculator.calculate_score() == HardSoftScore.of(-1, -752)


def test_calculators_do_not_share_aggregates(election):
    first = ElectionIncrementalScoreCalculator(6)
    second = ElectionIncrementalScoreCalculator(6)
    first.reset_working_solution(election)
    second.reset_working_solution(election)

    state = election.federal_states[1]
    first.before_variable_changed(state, VARIABLE)
    state.winning_candidate = Candidate.GAMER
    first.after_variable_changed(state, VARIABLE)

    assert first.aggregate_snapshot() != second.aggregate_snapshot()
    assert second.aggregate_snapshot() == {"votes": 5, "supporters": 752}


def test_failed_reset_leaves_the_calculator_unusable(election, calculator):
    first, _, third = election.federal_states
    election.federal_states = [third, first, first]
    with pytest.raises(ScoreProtocolError):
        calculator.reset_working_solution(election)
    assert calculator.state is CalculatorState.UNINITIALIZED
    with pytest.raises(ScoreProtocolError):
        calculator.calculate_score()

    election.federal_states = [first, third]
    calculator.reset_working_solution(election)
    assert calculator.calculate_score() == HardSoftScore.of(-1, -752)
