from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, List

from core.solution import PlanningSolution, PlanningVariable
from utils.constants import DOUBLE_BOOKING_WEIGHT, SKILL_MISMATCH_WEIGHT, WORKLOAD_WEIGHT


@dataclass(frozen=True)
class Skill:
    name: str


@dataclass(eq=False)
class Spot:
    """A place that needs one employee with `required_skill` per time slot."""

    name: str
    required_skill: Skill


@dataclass(frozen=True)
class TimeSlot:
    start: datetime
    end: datetime


@dataclass(eq=False)
class Employee:
    name: str
    skills: FrozenSet[Skill] = field(default_factory=frozenset)

    def has_skill(self, skill: Skill) -> bool:
        return skill in self.skills


@dataclass
class RosterParametrization:
    """Constraint weights of the roster score."""

    skill_mismatch_weight: int = SKILL_MISMATCH_WEIGHT
    double_booking_weight: int = DOUBLE_BOOKING_WEIGHT
    workload_weight: int = WORKLOAD_WEIGHT


class ShiftAssignment:
    employee = PlanningVariable()

    def __init__(self, spot: Spot, time_slot: TimeSlot, employee: Employee = None):
        self.spot = spot
        self.time_slot = time_slot
        self.employee = employee

    def __repr__(self):
        return f"ShiftAssignment({self.spot.name!r}, {self.time_slot.start.isoformat()})"


class Roster(PlanningSolution):
    entity_collection = "shift_assignments"
    value_range_providers = {"employee": "employees"}

    def __init__(
        self,
        parametrization: RosterParametrization,
        skills: List[Skill],
        spots: List[Spot],
        time_slots: List[TimeSlot],
        employees: List[Employee],
        shift_assignments: List[ShiftAssignment],
    ):
        super().__init__()
        self.parametrization = parametrization
        self.skills = skills
        self.spots = spots
        self.time_slots = time_slots
        self.employees = employees
        self.shift_assignments = shift_assignments
