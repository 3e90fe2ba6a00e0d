from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

TransportTypeLiteral = Literal["bus", "train", "ferry"]


class StopSchema(BaseModel):
    name: str
    x: int
    y: int
    route_numbers: list[int] = []
    neighbours: list[str] = []


class RouteSchema(BaseModel):
    type: TransportTypeLiteral
    name: str
    route_number: int
    stops: list[str] = []
    vehicle_ids: list[int] = []


class VehicleSchema(BaseModel):
    type: TransportTypeLiteral
    id: int
    capacity: int
    route_number: int
    extra: str
    current_stop: str | None = None


class NetworkSchema(BaseModel):
    stops: list[StopSchema] = []
    routes: list[RouteSchema] = []
    vehicles: list[VehicleSchema] = []


class NetworkDocumentSchema(BaseModel):
    document: str = Field(..., description="Network document text")
