from domain.election import Election, FederalState
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
from exceptions.custom_errors import ValueRangeError
from schemas.score.election import ElectionScoreRequest
from schemas.score.flp import FlpScoreRequest
from schemas.score.roster import RosterScoreRequest
from utils.constants import SETUP_COST_SCALE


def _lookup(index: dict, key, kind: str):
    """Resolve a reference by key or raise ValueRangeError naming the missing key."""
    try:
        return index[key]
    except KeyError:
        raise ValueRangeError(f"Unknown {kind} {key!r}.")


def election_from_request(request: ElectionScoreRequest) -> Election:
    federal_states = [
        FederalState(s.name, s.population, s.electoralVotes, s.winningCandidate)
        for s in request.federalStates
    ]
    return Election(federal_states, request.winningThreshold)


def roster_from_request(request: RosterScoreRequest) -> Roster:
    """
    Build a Roster from its request body.

    Spots, employees and skills are referenced by name and time slots by their
    index in `timeSlots`. A dangling reference raises ValueRangeError.
    """
    skills = {name: Skill(name) for name in request.skills}
    spots = {
        s.name: Spot(s.name, _lookup(skills, s.requiredSkill, "skill"))
        for s in request.spots
    }
    time_slots = [TimeSlot(t.start, t.end) for t in request.timeSlots]
    employees = {
        e.name: Employee(e.name, frozenset(_lookup(skills, k, "skill") for k in e.skills))
        for e in request.employees
    }

    shift_assignments = []
    for a in request.shiftAssignments:
        if not 0 <= a.timeSlot < len(time_slots):
            raise ValueRangeError(f"Unknown time slot index {a.timeSlot}.")
        employee = _lookup(employees, a.employee, "employee") if a.employee is not None else None
        shift_assignments.append(
            ShiftAssignment(_lookup(spots, a.spot, "spot"), time_slots[a.timeSlot], employee)
        )

    parametrization = RosterParametrization(
        skill_mismatch_weight=request.skillMismatchWeight,
        double_booking_weight=request.doubleBookingWeight,
        workload_weight=request.workloadWeight,
    )
    return Roster(
        parametrization,
        list(skills.values()),
        list(spots.values()),
        time_slots,
        list(employees.values()),
        shift_assignments,
    )


def flp_from_request(request: FlpScoreRequest) -> FlpSolution:
    warehouses = {
        w.id: Warehouse(
            w.id,
            Location(w.latitude, w.longitude),
            round(w.setupCost * SETUP_COST_SCALE),
            w.capacity,
        )
        for w in request.warehouses
    }
    stores = [
        Store(
            s.id,
            Location(s.latitude, s.longitude),
            s.demand,
            _lookup(warehouses, s.warehouse, "warehouse") if s.warehouse is not None else None,
        )
        for s in request.stores
    ]
    return FlpSolution(list(warehouses.values()), stores)
