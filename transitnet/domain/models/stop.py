from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from transitnet.domain.exceptions import NoNameError

from .transport_type import reject_delimiters, strip_line_breaks

if TYPE_CHECKING:
    from .passenger import Passenger
    from .route import Route
    from .vehicle import PublicTransport


@dataclass(eq=False, slots=True)
class Stop:
    """A named location where vehicles collect and drop off passengers.

    Two stops are equal when they share name, coordinates and the set of
    route numbers they belong to. Repeated routes do not affect equality.
    """

    name: str
    x: int
    y: int

    _routes: list[Route] = field(default_factory=list, init=False, repr=False)
    _neighbours: list[Stop] = field(default_factory=list, init=False, repr=False)
    _waiting: list[Passenger] = field(default_factory=list, init=False, repr=False)
    _vehicles: list[PublicTransport] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.name = strip_line_breaks(self.name)
        if not self.name:
            raise NoNameError("Stop name must not be empty")
        reject_delimiters(self.name, "Stop name")

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    @property
    def neighbours(self) -> tuple[Stop, ...]:
        return tuple(self._neighbours)

    @property
    def waiting_passengers(self) -> tuple[Passenger, ...]:
        return tuple(self._waiting)

    @property
    def vehicles(self) -> tuple[PublicTransport, ...]:
        return tuple(self._vehicles)

    def route_numbers(self) -> frozenset[int]:
        return frozenset(r.route_number for r in self._routes)

    def add_route(self, route: Route | None) -> None:
        if route is None:
            return
        self._routes.append(route)

    def add_neighbouring_stop(self, neighbour: Stop | None) -> None:
        if neighbour is None or neighbour in self._neighbours:
            return
        self._neighbours.append(neighbour)

    def add_passenger(self, passenger: Passenger | None) -> None:
        if passenger is None:
            return
        self._waiting.append(passenger)

    def is_at_stop(self, transport: PublicTransport | None) -> bool:
        return transport is not None and transport in self._vehicles

    def transport_arrive(self, transport: PublicTransport | None) -> None:
        """Record a vehicle arriving here and unload its passengers onto the stop.

        The vehicle's own location is left untouched.
        """
        if transport is None or transport in self._vehicles:
            return
        self._waiting.extend(transport.unload())
        self._vehicles.append(transport)

    def transport_depart(
        self, transport: PublicTransport | None, next_stop: Stop | None
    ) -> None:
        if transport is None or next_stop is None:
            return
        if transport not in self._vehicles:
            return
        self._vehicles.remove(transport)
        next_stop._vehicles.append(transport)
        transport.travel_to(next_stop)

    def distance_to(self, stop: Stop | None) -> int:
        """Manhattan distance to ``stop``, or -1 when no stop is given."""
        if stop is None:
            return -1
        return abs(self.x - stop.x) + abs(self.y - stop.y)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Stop):
            return NotImplemented
        return (
            self.name == other.name
            and self.x == other.x
            and self.y == other.y
            and self.route_numbers() == other.route_numbers()
        )

    def __hash__(self) -> int:
        return hash((self.name, self.x, self.y, self.route_numbers()))

    def __str__(self) -> str:
        return f"{self.name} ({self.x}, {self.y})"
