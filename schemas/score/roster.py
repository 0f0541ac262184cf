from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
import datetime as dt
from utils.constants import DOUBLE_BOOKING_WEIGHT, SKILL_MISMATCH_WEIGHT, WORKLOAD_WEIGHT


class SpotInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    requiredSkill: str


class TimeSlotInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    start: dt.datetime
    end: dt.datetime

    @model_validator(mode="after")
    def check_order(self):
        if self.end <= self.start:
            raise ValueError(f"Time slot end ({self.end}) must be after its start ({self.start}).")
        return self


class EmployeeInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    skills: List[str] = Field(default_factory=list)


class ShiftAssignmentInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    spot: str  # spot name
    timeSlot: int  # index into timeSlots
    employee: Optional[str] = None  # employee name, None when unassigned


class RosterScoreRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    skills: List[str]
    spots: List[SpotInput]
    timeSlots: List[TimeSlotInput]
    employees: List[EmployeeInput]
    shiftAssignments: List[ShiftAssignmentInput]
    skillMismatchWeight: int = Field(default=SKILL_MISMATCH_WEIGHT, ge=0)
    doubleBookingWeight: int = Field(default=DOUBLE_BOOKING_WEIGHT, ge=0)
    workloadWeight: int = Field(default=WORKLOAD_WEIGHT, ge=0)
