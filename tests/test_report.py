from domain.election import Candidate, Election, FederalState
from utils.report import REPORT_COLUMNS, format_election_report, summarize_election


def test_summary_lists_won_states_by_votes_then_population(election):
    election.federal_states.append(FederalState("D", 300, 2, Candidate.GAMER))
    states_df, totals = summarize_election(election)
    assert list(states_df.columns) == REPORT_COLUMNS
    assert list(states_df["Name"]) == ["D", "C", "A"]
    assert list(states_df["Minimum population"]) == [151, 251, 501]
    assert totals["Electoral votes"] == 7
    assert totals["Minimum population"] == 903
    assert totals["Population"] == 3800


def test_summary_of_the_example(election):
    _, totals = summarize_election(election)
    assert totals["Electoral votes"] == 5
    assert totals["Minimum population"] == 752
    assert totals["Population"] == 3500
    assert round(totals["Percentage"], 2) == 21.49


def test_summary_for_another_candidate(election):
    states_df, totals = summarize_election(election, Candidate.NORMAL)
    assert list(states_df["Name"]) == ["B"]
    assert totals["Minimum population"] == 1001


def test_report_text(election):
    lines = format_election_report(election).splitlines()
    assert lines[:2] == ["Election", "========"]
    assert lines[2].startswith("C ")
    assert lines[2].endswith("EC:         251 of         500 voters (50.20%).")
    assert lines[3].startswith("A ")
    assert lines[4] == ""
    assert lines[5].startswith("TOTAL")
    assert lines[5].endswith("5 EC:         752 of       3,500 voters (21.49%).")


def test_report_of_an_election_nobody_won():
    report = format_election_report(Election([FederalState("A", 10, 1)]))
    assert report.splitlines()[-1].endswith("0 EC:           0 of          10 voters (0.00%).")
