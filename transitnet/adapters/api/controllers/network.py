from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from transitnet.adapters.api.dependencies import get_network_service
from transitnet.adapters.api.schemas.network import (
    NetworkDocumentSchema,
    NetworkSchema,
    RouteSchema,
    StopSchema,
    VehicleSchema,
)
from transitnet.app.services.network_service import NetworkService, NetworkSummary

router = APIRouter(prefix="/network", tags=["network"])


def _summary_to_schema(summary: NetworkSummary) -> NetworkSchema:
    return NetworkSchema(
        stops=[
            StopSchema(
                name=s.name,
                x=s.x,
                y=s.y,
                route_numbers=list(s.route_numbers),
                neighbours=list(s.neighbours),
            )
            for s in summary.stops
        ],
        routes=[
            RouteSchema(
                type=r.type,
                name=r.name,
                route_number=r.route_number,
                stops=list(r.stops),
                vehicle_ids=list(r.vehicle_ids),
            )
            for r in summary.routes
        ],
        vehicles=[
            VehicleSchema(
                type=v.type,
                id=v.id,
                capacity=v.capacity,
                route_number=v.route_number,
                extra=v.extra,
                current_stop=v.current_stop,
            )
            for v in summary.vehicles
        ],
    )


@router.get("", response_model=NetworkSchema)
def get_network(
    service: NetworkService = Depends(get_network_service),
) -> NetworkSchema:
    return _summary_to_schema(service.summary())


@router.get("/document", response_class=PlainTextResponse)
def get_network_document(
    service: NetworkService = Depends(get_network_service),
) -> str:
    return service.canonical_document()


@router.post("/validate", response_model=NetworkSchema)
def validate_network_document(
    req: NetworkDocumentSchema,
    service: NetworkService = Depends(get_network_service),
) -> NetworkSchema:
    return _summary_to_schema(service.validate_document(req.document))
