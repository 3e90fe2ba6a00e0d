from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from transitnet.domain.exceptions import CapacityError

from .transport_type import TransportType, reject_delimiters, strip_line_breaks

if TYPE_CHECKING:
    from .passenger import Passenger
    from .route import Route
    from .stop import Stop


DEFAULT_FERRY_TYPE = "CityCat"


@dataclass(eq=False, slots=True)
class PublicTransport:
    """A vehicle bound to one route, carrying passengers up to its capacity.

    The vehicle starts at the route's start stop, or nowhere if the route
    has no stops yet. Capacity is not validated here.
    """

    type: ClassVar[TransportType]

    id: int
    capacity: int
    route: Route

    _current_stop: Stop | None = field(default=None, init=False, repr=False)
    _passengers: list[Passenger] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if getattr(self.__class__, "type", None) is None:
            raise TypeError("PublicTransport is abstract; use Bus, Train or Ferry")
        if self.route is not None and not self.route.is_empty:
            self._current_stop = self.route.start_stop

    @property
    def current_stop(self) -> Stop | None:
        return self._current_stop

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return tuple(self._passengers)

    @property
    def passenger_count(self) -> int:
        return len(self._passengers)

    @property
    def extra(self) -> str | int:
        """The variant-specific field (registration, carriages or ferry type)."""
        raise NotImplementedError

    def add_passenger(self, passenger: Passenger | None) -> None:
        if passenger is None:
            return
        if len(self._passengers) >= self.capacity:
            raise CapacityError(
                f"{self.type.value} {self.id} is full ({self.capacity} passengers)"
            )
        self._passengers.append(passenger)

    def remove_passenger(self, passenger: Passenger | None) -> bool:
        for i, onboard in enumerate(self._passengers):
            if onboard is passenger:
                del self._passengers[i]
                return True
        return False

    def unload(self) -> list[Passenger]:
        unloaded = self._passengers
        self._passengers = []
        return unloaded

    def travel_to(self, stop: Stop | None) -> None:
        # Stops off the vehicle's route are ignored.
        if stop is None or stop not in self.route.stops:
            return
        self._current_stop = stop

    def __str__(self) -> str:
        return (
            f"{self.type.value} number {self.id} ({self.capacity}) "
            f"on route {self.route.route_number}"
        )


@dataclass(eq=False, slots=True)
class Bus(PublicTransport):
    type: ClassVar[TransportType] = TransportType.BUS

    registration_number: str = ""

    def __post_init__(self) -> None:
        PublicTransport.__post_init__(self)
        self.registration_number = reject_delimiters(
            strip_line_breaks(self.registration_number), "Registration number"
        )

    @property
    def extra(self) -> str:
        return self.registration_number


@dataclass(eq=False, slots=True)
class Train(PublicTransport):
    type: ClassVar[TransportType] = TransportType.TRAIN

    carriage_count: int = 1

    def __post_init__(self) -> None:
        PublicTransport.__post_init__(self)
        if self.carriage_count <= 0:
            self.carriage_count = 1

    @property
    def extra(self) -> int:
        return self.carriage_count


@dataclass(eq=False, slots=True)
class Ferry(PublicTransport):
    type: ClassVar[TransportType] = TransportType.FERRY

    ferry_type: str = DEFAULT_FERRY_TYPE

    def __post_init__(self) -> None:
        PublicTransport.__post_init__(self)
        ferry_type = strip_line_breaks(self.ferry_type) or DEFAULT_FERRY_TYPE
        self.ferry_type = reject_delimiters(ferry_type, "Ferry type")

    @property
    def extra(self) -> str:
        return self.ferry_type
