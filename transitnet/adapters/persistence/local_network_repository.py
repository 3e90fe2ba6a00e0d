from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from transitnet.app.ports.output import INetworkRepository
from transitnet.domain.codec import decode_network, encode_network
from transitnet.domain.exceptions import AvailabilityError, FormatError
from transitnet.domain.models import Network

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocalNetworkRepository(INetworkRepository):
    """Reads and writes a network document on the local filesystem.

    Env vars:
      - NETWORK_PATH: path of the document (default: data/network.txt)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("NETWORK_PATH") or "data/network.txt"
        return Path(value)

    def load_network(self) -> Network:
        path = self._path()
        try:
            with path.open("r", encoding="utf-8", newline="") as fp:
                text = fp.read()
        except UnicodeDecodeError as exc:
            raise FormatError(f"{path} is not valid UTF-8 text") from exc
        except OSError as exc:
            raise AvailabilityError(f"Cannot read network document {path}: {exc}") from exc

        network = decode_network(text)
        logger.info(
            "Loaded network from %s (%d stops, %d routes, %d vehicles)",
            path,
            len(network.stops),
            len(network.routes),
            len(network.vehicles),
        )
        return network

    def save_network(self, network: Network) -> None:
        path = self._path()
        document = encode_network(network)
        try:
            with path.open("w", encoding="utf-8", newline="") as fp:
                fp.write(document)
        except OSError as exc:
            raise AvailabilityError(f"Cannot write network document {path}: {exc}") from exc
        logger.info("Saved network to %s", path)
