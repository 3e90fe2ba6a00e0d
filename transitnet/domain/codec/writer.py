from __future__ import annotations

from typing import Iterator

from transitnet.domain.models import Network

from .records import encode_route, encode_stop, encode_vehicle


def iter_network_lines(network: Network) -> Iterator[str]:
    """Yield the document lines of ``network`` in canonical order."""
    stops = network.stops
    yield str(len(stops))
    for stop in stops:
        yield encode_stop(stop)

    routes = network.routes
    yield str(len(routes))
    for route in routes:
        yield encode_route(route)

    vehicles = network.vehicles
    yield str(len(vehicles))
    for vehicle in vehicles:
        yield encode_vehicle(vehicle)


def encode_network(network: Network) -> str:
    return "".join(f"{line}\n" for line in iter_network_lines(network))
