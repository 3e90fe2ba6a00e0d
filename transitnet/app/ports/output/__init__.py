from .network_repository import INetworkRepository

__all__ = [
    "INetworkRepository",
]
