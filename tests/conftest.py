from datetime import datetime

import pytest

from domain.election import Candidate, Election, FederalState
from domain.flp import FlpSolution, Location, Store, Warehouse
from domain.roster import (
    Employee,
    Roster,
    RosterParametrization,
    ShiftAssignment,
    Skill,
    Spot,
    TimeSlot,
)


@pytest.fixture
def election() -> Election:
    """Three states, the gamer candidate wins the first and the third."""
    return Election(
        [
            FederalState("A", 1000, 3, Candidate.GAMER),
            FederalState("B", 2000, 5, Candidate.NORMAL),
            FederalState("C", 500, 2, Candidate.GAMER),
        ],
        winning_threshold=6,
    )


@pytest.fixture
def roster() -> Roster:
    """
    alice lacks skill B and is booked twice in the first slot, the last shift is open.
    """
    skill_a, skill_b = Skill("A"), Skill("B")
    spot_1, spot_2 = Spot("spot-1", skill_a), Spot("spot-2", skill_b)
    early = TimeSlot(datetime(2017, 2, 1, 6), datetime(2017, 2, 1, 14))
    late = TimeSlot(datetime(2017, 2, 1, 14), datetime(2017, 2, 1, 22))
    alice = Employee("alice", frozenset({skill_a}))
    bob = Employee("bob", frozenset({skill_a, skill_b}))
    return Roster(
        RosterParametrization(),
        [skill_a, skill_b],
        [spot_1, spot_2],
        [early, late],
        [alice, bob],
        [
            ShiftAssignment(spot_1, early, alice),
            ShiftAssignment(spot_2, early, alice),
            ShiftAssignment(spot_1, late, bob),
            ShiftAssignment(spot_2, late, None),
        ],
    )


@pytest.fixture
def flp() -> FlpSolution:
    """The second warehouse is one demand unit over capacity."""
    here, east = Location(0.0, 0.0), Location(0.0, 1.0)
    big = Warehouse(1, here, setup_cost=100, capacity=10)
    small = Warehouse(2, east, setup_cost=200, capacity=5)
    return FlpSolution(
        [big, small],
        [
            Store(1, here, 4, big),
            Store(2, here, 4, big),
            Store(3, east, 6, small),
        ],
    )
