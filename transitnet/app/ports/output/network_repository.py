from __future__ import annotations

from abc import ABC, abstractmethod

from transitnet.domain.models import Network


class INetworkRepository(ABC):
    """Port for reading and writing a network document."""

    @abstractmethod
    def load_network(self) -> Network:
        """Decode the stored document.

        Raises AvailabilityError if it cannot be read and FormatError if it
        is malformed.
        """

    @abstractmethod
    def save_network(self, network: Network) -> None:
        """Write the canonical encoding, raising AvailabilityError on failure."""
