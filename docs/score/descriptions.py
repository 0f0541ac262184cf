score_election_description = """
Score an election in which every federal state may be won by one of the candidates

### Request Body

- `federalStates`: List of federal states, each with:
    - `name`: Name of the state
    - `population`: Number of inhabitants
    - `electoralVotes`: Electoral votes awarded to the winner of the state
    - `winningCandidate`: `"GAMER"`, `"NORMAL"` or null when not decided yet (Optional)

- `winningThreshold`: Electoral votes the gamer candidate needs (Optional, default 270)

### Response

- `score`: e.g. `"-1hard/-752soft"`, prefixed by `[<n>]init/` when states are undecided
- `initScore`, `hardScore`, `softScore`: The score levels
- `feasible`: Whether the gamer candidate reaches the threshold with every state decided
- `states`: The states won by the gamer candidate, sorted by electoral votes then population
- `totals`: Electoral votes, minimum population and percentage over all won states
"""

score_roster_description = """
Score a worker roster

### Request Body

- `skills`: List of skill names
- `spots`: List of spots, each with a `name` and a `requiredSkill`
- `timeSlots`: List of time slots, each with a `start` and `end` datetime
- `employees`: List of employees, each with a `name` and the names of their `skills`
- `shiftAssignments`: List of assignments, each with a `spot` name, a `timeSlot` index and an `employee` name (null when unassigned)
- `skillMismatchWeight`, `doubleBookingWeight`, `workloadWeight`: Constraint weights (Optional)

### Response

- `score`, `initScore`, `hardScore`, `softScore`, `feasible`
- `assigned`: Number of assigned shifts
- `unassigned`: Number of shifts without an employee
"""

score_flp_description = """
Score a facility location solution

### Request Body

- `warehouses`: List of warehouses, each with `id`, `latitude`, `longitude`, `setupCost` and `capacity`
- `stores`: List of stores, each with `id`, `latitude`, `longitude`, `demand` and the `warehouse` id serving it (null when unassigned)

### Response

- `score`, `initScore`, `hardScore`, `softScore`, `feasible`
- `openWarehouses`: Number of warehouses serving at least one store
"""
