from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class WarehouseInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    setupCost: float = Field(ge=0)  # unscaled, e.g. 7500.25
    capacity: int = Field(ge=0)


class StoreInput(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    demand: int = Field(ge=0)
    warehouse: Optional[int] = None  # warehouse id, None when unassigned


class FlpScoreRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    warehouses: List[WarehouseInput]
    stores: List[StoreInput]
