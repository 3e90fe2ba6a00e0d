from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from .transport_type import strip_line_breaks

if TYPE_CHECKING:
    from .stop import Stop


@dataclass(eq=False, slots=True)
class Passenger:
    name: str = ""
    destination: Stop | None = None

    def __post_init__(self) -> None:
        self.name = strip_line_breaks(self.name)

    def __str__(self) -> str:
        if self.destination is None:
            return f"Passenger named {self.name}"
        return f"Passenger named {self.name} travelling to {self.destination.name}"


@dataclass(eq=False, slots=True)
class ConcessionPassenger(Passenger):
    """A passenger travelling on a concession that can lapse and be renewed.

    A renewal is accepted only when the new concession id is within
    ``RENEWAL_WINDOW`` of the current one. Any other id is refused: the
    concession keeps its old id and becomes invalid.
    """

    RENEWAL_WINDOW: ClassVar[int] = 1000

    concession_id: int = 0

    _valid: bool = field(default=True, init=False, repr=False)

    @property
    def is_valid(self) -> bool:
        return self._valid

    def expire(self) -> None:
        self._valid = False

    def renew(self, concession_id: int) -> None:
        if abs(concession_id - self.concession_id) >= self.RENEWAL_WINDOW:
            self._valid = False
            return
        self.concession_id = concession_id
        self._valid = True
