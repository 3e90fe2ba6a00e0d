from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from transitnet.domain.exceptions import (
    DuplicateRouteError,
    DuplicateStopError,
    UnknownRouteError,
    UnknownStopError,
)

from .route import Route
from .stop import Stop
from .vehicle import PublicTransport


@dataclass(eq=False, slots=True)
class Network:
    """The stops, routes and vehicles of one network document.

    Collections keep insertion order, which is also the order they are
    written back out in. ``None`` arguments to the mutators are ignored.
    """

    _stops: list[Stop] = field(default_factory=list, init=False, repr=False)
    _routes: list[Route] = field(default_factory=list, init=False, repr=False)
    _vehicles: list[PublicTransport] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def stops(self) -> tuple[Stop, ...]:
        return tuple(self._stops)

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    @property
    def vehicles(self) -> tuple[PublicTransport, ...]:
        return tuple(self._vehicles)

    def find_stop(self, name: str) -> Stop | None:
        """First stop called ``name``, in insertion order."""
        return next((s for s in self._stops if s.name == name), None)

    def find_route(self, route_number: int) -> Route | None:
        return next(
            (r for r in self._routes if r.route_number == route_number), None
        )

    @staticmethod
    def _same_place(stop: Stop, others: Iterable[Stop]) -> bool:
        # A document cannot tell apart stops that share name and coordinates,
        # whatever routes they belong to.
        return any(
            s.name == stop.name and s.x == stop.x and s.y == stop.y for s in others
        )

    def add_stop(self, stop: Stop | None) -> None:
        """Raises DuplicateStopError if a stop with this name and position exists."""
        if stop is None:
            return
        if self._same_place(stop, self._stops):
            raise DuplicateStopError(f"Stop {stop.name!r} is already in the network")
        self._stops.append(stop)

    def add_stops(self, stops: Iterable[Stop | None] | None) -> None:
        """Add every stop, or none of them.

        Nothing is added when the collection itself or any element is None,
        and a duplicate raises before the network changes.
        """
        if stops is None:
            return
        batch = list(stops)
        if any(s is None for s in batch):
            return

        accepted: list[Stop] = []
        for stop in batch:
            if self._same_place(stop, self._stops) or self._same_place(
                stop, accepted
            ):
                raise DuplicateStopError(
                    f"Stop {stop.name!r} is already in the network"
                )
            accepted.append(stop)
        self._stops.extend(accepted)

    def add_route(self, route: Route | None) -> None:
        if route is None:
            return
        if self.find_route(route.route_number) is not None:
            raise DuplicateRouteError(
                f"Route number {route.route_number} is already in the network"
            )
        for stop in route.stops:
            if not any(s is stop for s in self._stops):
                raise UnknownStopError(
                    f"Route {route.route_number} uses stop {stop.name!r} "
                    "which is not in the network"
                )
            if self.find_stop(stop.name) is not stop:
                raise UnknownStopError(
                    f"Route {route.route_number} uses stop {stop.name!r} at "
                    f"({stop.x}, {stop.y}), but that name resolves to an earlier stop"
                )
        self._routes.append(route)

    def add_vehicle(self, vehicle: PublicTransport | None) -> None:
        """Attach ``vehicle`` to its route and record it in the network.

        Raises EmptyRouteError or IncompatibleTypeError from the route.
        """
        if vehicle is None:
            return
        if not any(r is vehicle.route for r in self._routes):
            raise UnknownRouteError(
                f"{vehicle.type.value} {vehicle.id} runs on route "
                f"{vehicle.route.route_number} which is not in the network"
            )
        vehicle.route.add_transport(vehicle)
        self._vehicles.append(vehicle)
