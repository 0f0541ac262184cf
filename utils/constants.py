import json
from pathlib import Path

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

# Build the path to the JSON config file
CONSTANTS_PATH = Path(__file__).parent.parent / "config" / "constants.json"

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
LOGGER_NAME = _constants["LOGGER_NAME"]

ELECTION_FILE = _constants["ELECTION_FILE"]
ELECTION_COLUMNS = _constants["ELECTION_COLUMNS"]
WINNING_THRESHOLD = _constants["WINNING_THRESHOLD"]

SKILL_MISMATCH_WEIGHT = _constants["SKILL_MISMATCH_WEIGHT"]
DOUBLE_BOOKING_WEIGHT = _constants["DOUBLE_BOOKING_WEIGHT"]
WORKLOAD_WEIGHT = _constants["WORKLOAD_WEIGHT"]

SETUP_COST_SCALE = _constants["SETUP_COST_SCALE"]
EARTH_RADIUS_METERS = _constants["EARTH_RADIUS_METERS"]
