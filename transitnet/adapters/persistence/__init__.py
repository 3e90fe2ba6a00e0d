from .local_network_repository import LocalNetworkRepository
from .s3_network_repository import S3NetworkRepository

__all__ = [
    "LocalNetworkRepository",
    "S3NetworkRepository",
]
