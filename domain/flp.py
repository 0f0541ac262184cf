import math
from dataclasses import dataclass
from typing import List

from core.solution import PlanningSolution, PlanningVariable
from utils.constants import EARTH_RADIUS_METERS


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def distance_to(self, other: "Location") -> int:
        """Great-circle distance in whole meters."""
        lat1, lat2 = math.radians(self.latitude), math.radians(other.latitude)
        d_lat = lat2 - lat1
        d_lon = math.radians(other.longitude - self.longitude)
        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        return round(2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(a)))


@dataclass(eq=False)
class Warehouse:
    id: int
    location: Location
    setup_cost: int  # scaled by SETUP_COST_SCALE to stay integral
    capacity: int


class Store:
    warehouse = PlanningVariable()

    def __init__(self, id: int, location: Location, demand: int, warehouse: Warehouse = None):
        self.id = id
        self.location = location
        self.demand = demand
        self.warehouse = warehouse

    def distance_to_warehouse(self) -> int:
        if self.warehouse is None:
            return 0
        return self.location.distance_to(self.warehouse.location)

    def __repr__(self):
        return f"Store({self.id})"


class FlpSolution(PlanningSolution):
    entity_collection = "stores"
    value_range_providers = {"warehouse": "warehouses"}

    def __init__(self, warehouses: List[Warehouse], stores: List[Store]):
        super().__init__()
        self.warehouses = warehouses
        self.stores = stores
