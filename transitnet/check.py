"""Load a network document from a file and report what it contains.

Exit status: 0 when the document is valid, 1 for a format error and 2 when
the file cannot be read.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from transitnet.adapters.persistence import LocalNetworkRepository
from transitnet.app.services.network_service import NetworkService
from transitnet.domain.exceptions import AvailabilityError, FormatError

logger = logging.getLogger("transitnet")

EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_UNAVAILABLE = 2


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="transitnet", description="Check a transit network document."
    )
    parser.add_argument("path", help="network document to load")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    service = NetworkService(repository=LocalNetworkRepository(path=args.path))
    try:
        summary = service.summary()
    except AvailabilityError as exc:
        logger.error("%s", exc)
        return EXIT_UNAVAILABLE
    except FormatError as exc:
        logger.error("Invalid network document %s: %s", args.path, exc)
        return EXIT_FORMAT_ERROR

    logger.info(
        "%s: %d stops, %d routes, %d vehicles",
        args.path,
        len(summary.stops),
        len(summary.routes),
        len(summary.vehicles),
    )
    for route in summary.routes:
        logger.info(
            "%s route %d (%s): %s",
            route.type,
            route.route_number,
            route.name,
            " -> ".join(route.stops) or "no stops",
        )
    return EXIT_OK
