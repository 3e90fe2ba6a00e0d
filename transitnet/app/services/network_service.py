from __future__ import annotations

from dataclasses import dataclass

from transitnet.app.ports.output import INetworkRepository
from transitnet.domain.codec import decode_network, encode_network
from transitnet.domain.models import Network, PublicTransport, Route, Stop


@dataclass(frozen=True, slots=True)
class StopSummary:
    name: str
    x: int
    y: int
    route_numbers: tuple[int, ...]
    neighbours: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RouteSummary:
    type: str
    name: str
    route_number: int
    stops: tuple[str, ...]
    vehicle_ids: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class VehicleSummary:
    type: str
    id: int
    capacity: int
    route_number: int
    extra: str
    current_stop: str | None


@dataclass(frozen=True, slots=True)
class NetworkSummary:
    stops: tuple[StopSummary, ...]
    routes: tuple[RouteSummary, ...]
    vehicles: tuple[VehicleSummary, ...]


def _stop_summary(stop: Stop) -> StopSummary:
    return StopSummary(
        name=stop.name,
        x=stop.x,
        y=stop.y,
        route_numbers=tuple(sorted(stop.route_numbers())),
        neighbours=tuple(n.name for n in stop.neighbours),
    )


def _route_summary(route: Route) -> RouteSummary:
    return RouteSummary(
        type=route.type.value,
        name=route.name,
        route_number=route.route_number,
        stops=tuple(s.name for s in route.stops),
        vehicle_ids=tuple(v.id for v in route.transports),
    )


def _vehicle_summary(vehicle: PublicTransport) -> VehicleSummary:
    current = vehicle.current_stop
    return VehicleSummary(
        type=vehicle.type.value,
        id=vehicle.id,
        capacity=vehicle.capacity,
        route_number=vehicle.route.route_number,
        extra=str(vehicle.extra),
        current_stop=current.name if current is not None else None,
    )


def summarize(network: Network) -> NetworkSummary:
    return NetworkSummary(
        stops=tuple(_stop_summary(s) for s in network.stops),
        routes=tuple(_route_summary(r) for r in network.routes),
        vehicles=tuple(_vehicle_summary(v) for v in network.vehicles),
    )


@dataclass(slots=True)
class NetworkService:
    """Application service (use case) for loading, saving and checking networks."""

    repository: INetworkRepository

    def load(self) -> Network:
        return self.repository.load_network()

    def save(self, network: Network) -> None:
        self.repository.save_network(network)

    def summary(self) -> NetworkSummary:
        return summarize(self.load())

    def canonical_document(self) -> str:
        return encode_network(self.load())

    def validate_document(self, document: str) -> NetworkSummary:
        """Decode ``document`` without storing it; raises FormatError if invalid."""
        return summarize(decode_network(document))
