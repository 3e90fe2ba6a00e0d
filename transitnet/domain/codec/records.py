"""Single-line record codec for stops, routes and vehicles.

Record grammars:

    stop     name:x:y
    route    type,name,number:stop0|stop1|...|stopN
    vehicle  type,id,capacity,routeNumber,extra

``extra`` is the registration number (bus), carriage count (train) or
ferry type (ferry). Integers may carry surrounding spaces; text fields are
taken verbatim. ``,`` ``:`` and ``|`` are structural and never part of a name.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from transitnet.domain.exceptions import FormatError
from transitnet.domain.models import (
    Bus,
    BusRoute,
    Ferry,
    FerryRoute,
    PublicTransport,
    Route,
    Stop,
    Train,
    TrainRoute,
    TransportType,
)

_INT_RE = re.compile(r"[+-]?[0-9]+")

_ROUTE_CLASSES: dict[TransportType, type[Route]] = {
    TransportType.BUS: BusRoute,
    TransportType.TRAIN: TrainRoute,
    TransportType.FERRY: FerryRoute,
}


def _bus(vehicle_id: int, capacity: int, route: Route, extra: str) -> Bus:
    return Bus(vehicle_id, capacity, route, extra)


def _train(vehicle_id: int, capacity: int, route: Route, extra: str) -> Train:
    return Train(vehicle_id, capacity, route, parse_int(extra, "carriage count"))


def _ferry(vehicle_id: int, capacity: int, route: Route, extra: str) -> Ferry:
    return Ferry(vehicle_id, capacity, route, extra)


_VEHICLE_FACTORIES: dict[
    TransportType, Callable[[int, int, Route, str], PublicTransport]
] = {
    TransportType.BUS: _bus,
    TransportType.TRAIN: _train,
    TransportType.FERRY: _ferry,
}


def parse_int(raw: str, what: str) -> int:
    value = raw.strip(" ")
    if not _INT_RE.fullmatch(value):
        raise FormatError(f"{what} is not an integer: {raw!r}")
    try:
        return int(value)
    except ValueError as exc:
        # Interpreter limit on digit count for str -> int conversion.
        raise FormatError(f"{what} has too many digits ({len(value)})") from exc


def _parse_type(raw: str) -> TransportType:
    try:
        return TransportType(raw)
    except ValueError:
        raise FormatError(f"unknown transport type: {raw!r}") from None


def _reject_line_breaks(record: str, kind: str) -> None:
    if "\n" in record or "\r" in record:
        raise FormatError(f"{kind} record spans more than one line")


def encode_stop(stop: Stop) -> str:
    return f"{stop.name}:{stop.x}:{stop.y}"


def decode_stop(record: str) -> Stop:
    _reject_line_breaks(record, "stop")

    fields = record.split(":")
    if len(fields) != 3:
        raise FormatError(f"stop record needs 3 ':'-separated fields: {record!r}")

    name, raw_x, raw_y = fields
    if not name:
        raise FormatError("stop name is empty")
    if "," in name or "|" in name:
        raise FormatError(f"stop name contains a delimiter: {name!r}")

    x = parse_int(raw_x, "stop x coordinate")
    y = parse_int(raw_y, "stop y coordinate")
    return Stop(name, x, y)


def encode_route(route: Route) -> str:
    stop_names = "|".join(stop.name for stop in route.stops)
    return f"{route.type.value},{route.name},{route.route_number}:{stop_names}"


def decode_route(record: str, existing_stops: Sequence[Stop]) -> Route:
    """Decode a route record and link it to stops from ``existing_stops``.

    Stop names resolve to the first stop in ``existing_stops`` with that
    name. Every name is resolved before any stop is touched, so a record
    that fails leaves the catalogue unchanged.
    """
    if existing_stops is None:
        raise FormatError("no stop catalogue to resolve route stops against")
    _reject_line_breaks(record, "route")

    head, sep, stop_list = record.partition(":")
    if not sep:
        raise FormatError(f"route record has no ':' before its stops: {record!r}")
    if "," in stop_list or ":" in stop_list:
        raise FormatError(f"unexpected delimiter in route stop list: {record!r}")

    fields = head.split(",")
    if len(fields) != 3:
        raise FormatError(
            f"route record needs type, name and number before ':': {record!r}"
        )

    raw_type, name, raw_number = fields
    route_type = _parse_type(raw_type)
    if "|" in name:
        raise FormatError(f"route name contains a delimiter: {name!r}")
    number = parse_int(raw_number, "route number")
    stops = _resolve_stops(stop_list, existing_stops)

    route = _ROUTE_CLASSES[route_type](name, number)
    for stop in stops:
        route.add_stop(stop)
    return route


def _resolve_stops(stop_list: str, existing_stops: Sequence[Stop]) -> list[Stop]:
    if stop_list == "":
        return []

    by_name: dict[str, Stop] = {}
    for stop in existing_stops:
        by_name.setdefault(stop.name, stop)

    resolved: list[Stop] = []
    for name in stop_list.split("|"):
        if not name:
            raise FormatError(f"empty stop name in route stop list: {stop_list!r}")
        stop = by_name.get(name)
        if stop is None:
            raise FormatError(f"route uses unknown stop {name!r}")
        resolved.append(stop)
    return resolved


def encode_vehicle(vehicle: PublicTransport) -> str:
    return (
        f"{vehicle.type.value},{vehicle.id},{vehicle.capacity},"
        f"{vehicle.route.route_number},{vehicle.extra}"
    )


def decode_vehicle(record: str, existing_routes: Sequence[Route]) -> PublicTransport:
    """Decode a vehicle record bound to a route from ``existing_routes``.

    The vehicle is not attached to the route; ``Network.add_vehicle`` does that.
    """
    if existing_routes is None:
        raise FormatError("no route catalogue to resolve vehicles against")
    _reject_line_breaks(record, "vehicle")
    if ":" in record or "|" in record:
        raise FormatError(f"unexpected delimiter in vehicle record: {record!r}")

    fields = record.split(",")
    if len(fields) != 5:
        raise FormatError(f"vehicle record needs 5 ','-separated fields: {record!r}")

    raw_type, raw_id, raw_capacity, raw_route, extra = fields
    vehicle_type = _parse_type(raw_type)
    vehicle_id = parse_int(raw_id, "vehicle id")
    capacity = parse_int(raw_capacity, "vehicle capacity")
    route_number = parse_int(raw_route, "vehicle route number")

    route = next((r for r in existing_routes if r.route_number == route_number), None)
    if route is None:
        raise FormatError(f"vehicle {vehicle_id} uses unknown route {route_number}")
    if route.type is not vehicle_type:
        raise FormatError(
            f"{vehicle_type.value} {vehicle_id} cannot run on "
            f"{route.type.value} route {route_number}"
        )

    return _VEHICLE_FACTORIES[vehicle_type](vehicle_id, capacity, route, extra)
