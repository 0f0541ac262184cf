import io
import pandas as pd
from typing import Union, IO
from pathlib import Path
from config.paths import DATA_DIR
from domain.election import Election, FederalState
from exceptions.custom_errors import FileContentError, FileReadingError
from utils.constants import ELECTION_COLUMNS, ELECTION_FILE, WINNING_THRESHOLD
import logging

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = r"\s*-?\d+\s*"


def _read_data_lines(path_or_buffer: Union[str, Path, IO]) -> str:
    """Return the input without its comment lines. Only lines starting with `#` are comments."""
    try:
        if hasattr(path_or_buffer, "read"):
            text = path_or_buffer.read()
        else:
            with open(path_or_buffer, "r", encoding="utf-8") as f:
                text = f.read()
    except Exception as e:
        raise FileReadingError(f"Error loading election: {e}")
    return "\n".join(line for line in text.splitlines() if not line.startswith("#"))


def load_election(
    path_or_buffer: Union[str, Path, IO, None] = None,
    winning_threshold: int = WINNING_THRESHOLD,
) -> Election:
    """
    Load an election from a comma-separated text file.

    Each data line holds `name,population,electoralVotes`. Blank lines and lines
    starting with `#` are skipped. Any other line must have exactly 3 tokens
    with integer population and electoral votes.

    Parameters:
        path_or_buffer: Path to the text file or file-like object. Defaults to 'data/election/president2016.txt'.
        winning_threshold: Electoral votes the tracked candidate needs to win.

    Returns:
        Election: The federal states in file order, all unassigned.

    Raises:
        FileReadingError: If the input cannot be read.
        FileContentError: If a line is malformed.
    """
    if path_or_buffer is None:
        path_or_buffer = DATA_DIR / ELECTION_FILE

    expected = len(ELECTION_COLUMNS)
    data = _read_data_lines(path_or_buffer)
    try:
        df = pd.read_csv(
            io.StringIO(data),
            header=None,
            dtype=str,
            skip_blank_lines=True,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        logger.info("Election input has no data lines.")
        return Election([], winning_threshold)
    except pd.errors.ParserError as e:
        raise FileContentError(f"A line does not have {expected} tokens: {e}")
    except Exception as e:
        raise FileReadingError(f"Error loading election: {e}")

    if df.shape[1] != expected:
        raise FileContentError(
            f"The lines have {df.shape[1]} tokens instead of {expected} ({', '.join(ELECTION_COLUMNS)})."
        )
    df.columns = ELECTION_COLUMNS

    def line_of(idx) -> str:
        return ",".join("" if pd.isna(v) else str(v) for v in df.loc[idx].values)

    short_rows = df.index[df.isna().any(axis=1)]
    if len(short_rows):
        raise FileContentError(
            f"The line ({line_of(short_rows[0])}) does not have {expected} tokens."
        )

    for col in ELECTION_COLUMNS[1:]:
        bad_rows = df.index[~df[col].str.fullmatch(_INTEGER_PATTERN)]
        if len(bad_rows):
            raise FileContentError(
                f"The line ({line_of(bad_rows[0])}) has a non-integer {col} ({df.at[bad_rows[0], col]!r})."
            )

    df["name"] = df["name"].str.strip()
    for col in ELECTION_COLUMNS[1:]:
        df[col] = df[col].str.strip().astype("int64")

    federal_states = [
        FederalState(row.name, int(row.population), int(row.electoral_votes))
        for row in df.itertuples(index=False)
    ]
    logger.info(f"Loaded election with {len(federal_states)} federal states.")
    return Election(federal_states, winning_threshold)
