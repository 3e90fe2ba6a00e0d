from __future__ import annotations

import os

from transitnet.adapters.persistence import LocalNetworkRepository, S3NetworkRepository
from transitnet.app.ports.output import INetworkRepository
from transitnet.app.services.network_service import NetworkService


def get_network_repository() -> INetworkRepository:
    if os.getenv("NETWORK_BUCKET"):
        return S3NetworkRepository()
    return LocalNetworkRepository()


def get_network_service() -> NetworkService:
    return NetworkService(repository=get_network_repository())
