from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional
from domain.election import Candidate
from utils.constants import WINNING_THRESHOLD


class FederalStateInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    population: int = Field(ge=0)
    electoralVotes: int = Field(ge=0)
    winningCandidate: Optional[Candidate] = None

    @field_validator("winningCandidate", mode="before")
    @classmethod
    def parse_candidate(cls, value: Any) -> Any:
        """
        Accept the candidate either by enum name ("GAMER") or by label ("Gamer candidate"), case-insensitively.
        """
        if value is None or isinstance(value, Candidate):
            return value
        text = str(value).strip().upper()
        for candidate in Candidate:
            if text in (candidate.name, candidate.value.upper()):
                return candidate
        return value  # let pydantic report the invalid enum value


class ElectionScoreRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    federalStates: List[FederalStateInput]
    winningThreshold: int = Field(default=WINNING_THRESHOLD, ge=0)
