from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from transitnet.domain.exceptions import EmptyRouteError, IncompatibleTypeError

from .transport_type import TransportType, reject_delimiters, strip_line_breaks

if TYPE_CHECKING:
    from .stop import Stop
    from .vehicle import PublicTransport


@dataclass(eq=False, slots=True)
class Route:
    """An ordered sequence of stops followed by vehicles of one type.

    Use one of the typed variants (BusRoute, TrainRoute, FerryRoute).
    Routes compare equal on name and number; the hash uses the number only.
    """

    type: ClassVar[TransportType]

    name: str
    route_number: int

    _stops: list[Stop] = field(default_factory=list, init=False, repr=False)
    _transports: list[PublicTransport] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if getattr(self.__class__, "type", None) is None:
            raise TypeError("Route is abstract; use BusRoute, TrainRoute or FerryRoute")
        self.name = reject_delimiters(strip_line_breaks(self.name), "Route name")

    @property
    def stops(self) -> tuple[Stop, ...]:
        return tuple(self._stops)

    @property
    def transports(self) -> tuple[PublicTransport, ...]:
        return tuple(self._transports)

    @property
    def is_empty(self) -> bool:
        return not self._stops

    @property
    def start_stop(self) -> Stop:
        if not self._stops:
            raise EmptyRouteError(f"Route {self.route_number} has no stops")
        return self._stops[0]

    def add_stop(self, stop: Stop | None) -> None:
        """Append ``stop`` and link it with the previous stop as neighbours."""
        if stop is None:
            return

        stop.add_route(self)
        self._stops.append(stop)

        if len(self._stops) == 1:
            return

        previous = self._stops[-2]
        previous.add_neighbouring_stop(stop)
        stop.add_neighbouring_stop(previous)

    def add_transport(self, transport: PublicTransport | None) -> None:
        if transport is None:
            return
        if not self._stops:
            raise EmptyRouteError(f"Route {self.route_number} has no stops")
        if transport.type is not self.type:
            raise IncompatibleTypeError(
                f"{transport.type.value} cannot run on {self.type.value} route "
                f"{self.route_number}"
            )
        self._transports.append(transport)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self.name == other.name and self.route_number == other.route_number

    def __hash__(self) -> int:
        return hash(self.route_number)

    def __str__(self) -> str:
        return f"{self.type.value} route {self.route_number} ({self.name})"


class BusRoute(Route):
    __slots__ = ()
    type = TransportType.BUS


class TrainRoute(Route):
    __slots__ = ()
    type = TransportType.TRAIN


class FerryRoute(Route):
    __slots__ = ()
    type = TransportType.FERRY
