from __future__ import annotations

import logging
from dataclasses import dataclass

from transitnet.domain.exceptions import AvailabilityError, FormatError, TransportError
from transitnet.domain.models import Network

from .records import decode_route, decode_stop, decode_vehicle, parse_int

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _LineReader:
    lines: list[str]
    position: int = 0

    @property
    def line_number(self) -> int:
        """1-based number of the line last read (or about to be read at the end)."""
        return max(self.position, 1)

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.lines)

    def next_line(self, what: str) -> str:
        if self.exhausted:
            self.position = len(self.lines) + 1
            raise FormatError(f"expected {what}, found end of document")
        line = self.lines[self.position]
        self.position += 1
        if not line.strip():
            raise FormatError(f"expected {what}, found a blank line")
        return line

    def next_count(self, section: str) -> int:
        count = parse_int(self.next_line(f"{section} count"), f"{section} count")
        if count < 0:
            raise FormatError(f"{section} count is negative: {count}")
        return count


def _split_lines(text: str) -> list[str]:
    lines = text.replace("\r\n", "\n").split("\n")
    # A single trailing line terminator is allowed; anything more is content.
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def decode_network(text: str | None) -> Network:
    """Decode a whole network document.

    The document holds three sections in order, each a count line followed
    by that many records: stops, routes, vehicles. Any problem raises
    FormatError naming the offending line; no partially built network is
    ever returned.
    """
    if text is None:
        raise AvailabilityError("No network document was provided")

    reader = _LineReader(_split_lines(text))
    network = Network()

    try:
        for _ in range(reader.next_count("stop")):
            network.add_stop(decode_stop(reader.next_line("a stop record")))

        for _ in range(reader.next_count("route")):
            route = decode_route(reader.next_line("a route record"), network.stops)
            network.add_route(route)

        for _ in range(reader.next_count("vehicle")):
            vehicle = decode_vehicle(
                reader.next_line("a vehicle record"), network.routes
            )
            network.add_vehicle(vehicle)

        if not reader.exhausted:
            reader.position += 1
            raise FormatError("unexpected content after the vehicle section")
    except TransportError as exc:
        raise FormatError(f"line {reader.line_number}: {exc}") from exc

    logger.debug(
        "Decoded network: %d stops, %d routes, %d vehicles",
        len(network.stops),
        len(network.routes),
        len(network.vehicles),
    )
    return network
