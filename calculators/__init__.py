"""
calculators
-----------

Problem-specific score calculators, one module per problem:

- `election`: Electoral-vote apportionment (contribution based).
- `roster`: Worker shift rostering (skill mismatch, double booking, workload).
- `flp`: Facility location (capacity overrun, distance and setup cost).

Each module offers an incremental calculator driven by the move notification
protocol and an easy calculator that scores a whole solution from scratch.
"""
from .election import ElectionEasyScoreCalculator, ElectionIncrementalScoreCalculator
from .flp import FlpEasyScoreCalculator, FlpIncrementalScoreCalculator
from .roster import RosterEasyScoreCalculator, RosterIncrementalScoreCalculator
