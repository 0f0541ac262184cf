from fastapi import APIRouter, HTTPException
from calculators import (
    ElectionEasyScoreCalculator,
    ElectionIncrementalScoreCalculator,
    FlpEasyScoreCalculator,
    FlpIncrementalScoreCalculator,
    RosterEasyScoreCalculator,
    RosterIncrementalScoreCalculator,
)
from core.director import ScoreDirector
from core.score import HardSoftScore
from docs.score.descriptions import (
    score_election_description,
    score_flp_description,
    score_roster_description,
)
from exceptions.custom_errors import *
from schemas.score.election import ElectionScoreRequest
from schemas.score.flp import FlpScoreRequest
from schemas.score.roster import RosterScoreRequest
from utils.helpers.build_solution import (
    election_from_request,
    flp_from_request,
    roster_from_request,
)
from utils.logger import logger
from utils.report import summarize_election
import traceback

router = APIRouter(tags=["Score"])


def score_payload(score: HardSoftScore) -> dict:
    return {
        "score": str(score),
        "initScore": score.init_score,
        "hardScore": score.hard,
        "softScore": score.soft,
        "feasible": score.is_feasible,
    }


def run_director(director: ScoreDirector, verify: bool) -> HardSoftScore:
    """Score the working solution, optionally checked against a full recalculation."""
    director.solution.validate()
    if verify:
        director.assert_score_from_scratch()
    return director.calculate_score()


@router.post(
    "/election/score",
    response_model=dict,
    description=score_election_description,
    summary="Score Election",
)
async def score_election(request: ElectionScoreRequest, verify: bool = False):
    try:
        election = election_from_request(request)
        director = ScoreDirector(
            election,
            ElectionIncrementalScoreCalculator.for_election(election),
            ElectionEasyScoreCalculator(),
        )
        score = run_director(director, verify)
        logger.info(f"Scored election of {len(election.federal_states)} states: {score}")

        states_df, totals = summarize_election(election)
        response = score_payload(score)
        response["states"] = states_df.to_dict(orient="records")
        response["totals"] = totals
        return response

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")


@router.post(
    "/roster/score",
    response_model=dict,
    description=score_roster_description,
    summary="Score Roster",
)
async def score_roster(request: RosterScoreRequest, verify: bool = False):
    try:
        roster = roster_from_request(request)
        director = ScoreDirector(
            roster,
            RosterIncrementalScoreCalculator(roster.parametrization),
            RosterEasyScoreCalculator(),
        )
        score = run_director(director, verify)
        logger.info(f"Scored roster of {len(roster.shift_assignments)} shifts: {score}")

        unassigned = roster.count_uninitialized()
        response = score_payload(score)
        response["assigned"] = len(roster.shift_assignments) - unassigned
        response["unassigned"] = unassigned
        return response

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")


@router.post(
    "/flp/score",
    response_model=dict,
    description=score_flp_description,
    summary="Score Facility Location",
)
async def score_flp(request: FlpScoreRequest, verify: bool = False):
    try:
        solution = flp_from_request(request)
        director = ScoreDirector(
            solution, FlpIncrementalScoreCalculator(), FlpEasyScoreCalculator()
        )
        score = run_director(director, verify)
        logger.info(f"Scored facility location of {len(solution.stores)} stores: {score}")

        response = score_payload(score)
        response["openWarehouses"] = len(
            {id(s.warehouse) for s in solution.stores if s.warehouse is not None}
        )
        return response

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
