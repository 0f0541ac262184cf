from collections import defaultdict
from typing import Any, Dict

from core.calculator import EasyScoreCalculator, IncrementalScoreCalculator
from core.score import HardSoftScore
from domain.flp import FlpSolution, Store, Warehouse

"""
Scoring rules for the facility location problem.

Hard: the demand served by a warehouse must not exceed its capacity.
Soft: minimise the distance from every store to its warehouse plus the setup
cost of every warehouse that serves at least one store.
"""


def _overrun(usage: int, capacity: int) -> int:
    return max(0, usage - capacity)


class FlpIncrementalScoreCalculator(IncrementalScoreCalculator):
    def __init__(self):
        super().__init__()
        self._reset_aggregates()

    def _reset_aggregates(self) -> None:
        self.capacity_overrun = 0
        self.distance_cost = 0
        self.setup_cost = 0
        self.usage: Dict[Warehouse, int] = {}
        self.store_counts: Dict[Warehouse, int] = {}

    def _insert(self, store: Store) -> None:
        warehouse = store.warehouse
        if warehouse is None:
            return
        old_usage = self.usage.get(warehouse, 0)
        new_usage = old_usage + store.demand
        self.capacity_overrun += _overrun(new_usage, warehouse.capacity) - _overrun(
            old_usage, warehouse.capacity
        )
        self.usage[warehouse] = new_usage

        count = self.store_counts.get(warehouse, 0)
        if count == 0:
            self.setup_cost += warehouse.setup_cost
        self.store_counts[warehouse] = count + 1

        self.distance_cost += store.distance_to_warehouse()

    def _retract(self, store: Store) -> None:
        warehouse = store.warehouse
        if warehouse is None:
            return
        old_usage = self.usage[warehouse]
        new_usage = old_usage - store.demand
        self.capacity_overrun += _overrun(new_usage, warehouse.capacity) - _overrun(
            old_usage, warehouse.capacity
        )

        count = self.store_counts[warehouse] - 1
        if count == 0:
            self.setup_cost -= warehouse.setup_cost
            del self.store_counts[warehouse]
            del self.usage[warehouse]
        else:
            self.store_counts[warehouse] = count
            self.usage[warehouse] = new_usage

        self.distance_cost -= store.distance_to_warehouse()

    def _score(self, init_score: int) -> HardSoftScore:
        return HardSoftScore.of_uninitialized(
            init_score, -self.capacity_overrun, -(self.distance_cost + self.setup_cost)
        )

    def aggregate_snapshot(self) -> Dict[str, Any]:
        return {
            "capacity_overrun": self.capacity_overrun,
            "distance_cost": self.distance_cost,
            "setup_cost": self.setup_cost,
            "usage": dict(self.usage),
            "store_counts": dict(self.store_counts),
        }


class FlpEasyScoreCalculator(EasyScoreCalculator):
    def calculate_score(self, solution: FlpSolution, init_score: int = 0) -> HardSoftScore:
        usage = defaultdict(int)
        distance_cost = 0
        for store in solution.stores:
            if store.warehouse is None:
                continue
            usage[store.warehouse] += store.demand
            distance_cost += store.distance_to_warehouse()
        overrun = sum(_overrun(demand, w.capacity) for w, demand in usage.items())
        setup_cost = sum(w.setup_cost for w in usage)
        return HardSoftScore.of_uninitialized(init_score, -overrun, -(distance_cost + setup_cost))
