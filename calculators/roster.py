from collections import Counter
from typing import Any, Dict, Tuple

from core.calculator import EasyScoreCalculator, IncrementalScoreCalculator
from core.score import HardSoftScore
from domain.roster import Employee, Roster, RosterParametrization, ShiftAssignment, TimeSlot

"""
Scoring rules for the worker rostering problem.

Hard:
- an employee must have the skill required by the spot (skill mismatch);
- an employee works at most one spot per time slot (double booking, one
  penalty per conflicting pair).
Soft:
- spread the work evenly: penalise the sum over employees of the squared
  number of assigned shifts.
"""


def roster_score(
    parametrization: RosterParametrization,
    skill_mismatches: int,
    double_bookings: int,
    workload_squares: int,
    init_score: int = 0,
) -> HardSoftScore:
    hard = -(
        parametrization.skill_mismatch_weight * skill_mismatches
        + parametrization.double_booking_weight * double_bookings
    )
    soft = -parametrization.workload_weight * workload_squares
    return HardSoftScore.of_uninitialized(init_score, hard, soft)


class RosterIncrementalScoreCalculator(IncrementalScoreCalculator):
    def __init__(self, parametrization: RosterParametrization):
        super().__init__()
        self.parametrization = parametrization
        self._reset_aggregates()

    def _reset_aggregates(self) -> None:
        self.skill_mismatches = 0
        self.double_bookings = 0
        self.workload_squares = 0
        self.booking_counts: Dict[Tuple[Employee, TimeSlot], int] = {}
        self.workload: Dict[Employee, int] = {}

    def _insert(self, assignment: ShiftAssignment) -> None:
        employee = assignment.employee
        if employee is None:
            return
        if not employee.has_skill(assignment.spot.required_skill):
            self.skill_mismatches += 1

        key = (employee, assignment.time_slot)
        count = self.booking_counts.get(key, 0)
        self.double_bookings += count  # one new pair with each existing booking
        self.booking_counts[key] = count + 1

        shifts = self.workload.get(employee, 0)
        self.workload_squares += 2 * shifts + 1  # (n + 1)^2 - n^2
        self.workload[employee] = shifts + 1

    def _retract(self, assignment: ShiftAssignment) -> None:
        employee = assignment.employee
        if employee is None:
            return
        if not employee.has_skill(assignment.spot.required_skill):
            self.skill_mismatches -= 1

        key = (employee, assignment.time_slot)
        count = self.booking_counts[key] - 1
        self.double_bookings -= count
        if count:
            self.booking_counts[key] = count
        else:
            del self.booking_counts[key]

        shifts = self.workload[employee] - 1
        self.workload_squares -= 2 * shifts + 1
        if shifts:
            self.workload[employee] = shifts
        else:
            del self.workload[employee]

    def _score(self, init_score: int) -> HardSoftScore:
        return roster_score(
            self.parametrization,
            self.skill_mismatches,
            self.double_bookings,
            self.workload_squares,
            init_score,
        )

    def aggregate_snapshot(self) -> Dict[str, Any]:
        return {
            "skill_mismatches": self.skill_mismatches,
            "double_bookings": self.double_bookings,
            "workload_squares": self.workload_squares,
            "booking_counts": dict(self.booking_counts),
            "workload": dict(self.workload),
        }


class RosterEasyScoreCalculator(EasyScoreCalculator):
    def calculate_score(self, roster: Roster, init_score: int = 0) -> HardSoftScore:
        assigned = [a for a in roster.shift_assignments if a.employee is not None]
        skill_mismatches = sum(
            1 for a in assigned if not a.employee.has_skill(a.spot.required_skill)
        )
        bookings = Counter((a.employee, a.time_slot) for a in assigned)
        double_bookings = sum(n * (n - 1) // 2 for n in bookings.values())
        workload = Counter(a.employee for a in assigned)
        workload_squares = sum(n * n for n in workload.values())
        return roster_score(
            roster.parametrization,
            skill_mismatches,
            double_bookings,
            workload_squares,
            init_score,
        )
