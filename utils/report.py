import pandas as pd
from typing import Dict, Tuple
from domain.election import Candidate, Election

REPORT_COLUMNS = ["Name", "Electoral votes", "Minimum population", "Population", "Percentage"]


def _percentage(part: int, whole: int) -> float:
    return part * 100.0 / whole if whole else 0.0


def summarize_election(
    election: Election, tracked: Candidate = Candidate.GAMER
) -> Tuple[pd.DataFrame, Dict[str, float]]:
    """
    Summarise the federal states won by the tracked candidate.

    Returns:
        tuple: (states_df, totals)
            states_df (pd.DataFrame): One row per won state, sorted by electoral votes
                then population, ascending.
            totals (dict): Electoral votes and minimum population summed over the won
                states, the population of all states and the resulting percentage.
    """
    rows = [
        {
            "Name": s.name,
            "Electoral votes": s.electoral_votes,
            "Minimum population": s.minimum_majority_population,
            "Population": s.population,
            "Percentage": _percentage(s.minimum_majority_population, s.population),
        }
        for s in election.federal_states
        if s.winning_candidate is tracked
    ]
    states_df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    states_df = states_df.sort_values(
        by=["Electoral votes", "Population"], kind="stable"
    ).reset_index(drop=True)

    population_total = sum(s.population for s in election.federal_states)
    minimum_population = int(states_df["Minimum population"].sum())
    totals = {
        "Electoral votes": int(states_df["Electoral votes"].sum()),
        "Minimum population": minimum_population,
        "Population": population_total,
        "Percentage": _percentage(minimum_population, population_total),
    }
    return states_df, totals


def _format_line(name: str, votes: int, minimum: int, population: int, pct: float) -> str:
    return f"{name:<20} {votes:>3} EC: {minimum:>11,} of {population:>11,} voters ({pct:.2f}%)."


def format_election_report(election: Election, tracked: Candidate = Candidate.GAMER) -> str:
    """Render the election summary as the fixed-width text report."""
    states_df, totals = summarize_election(election, tracked)
    lines = ["Election", "========"]
    for row in states_df.itertuples(index=False):
        lines.append(_format_line(row[0], row[1], row[2], row[3], row[4]))
    lines.append("")
    lines.append(
        _format_line(
            "TOTAL",
            totals["Electoral votes"],
            totals["Minimum population"],
            totals["Population"],
            totals["Percentage"],
        )
    )
    return "\n".join(lines)
