from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.client import BaseClient

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = BaseClient  # type: ignore[misc,assignment]

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})
_LOCALSTACK_DEFAULT = "http://localhost:4566"


@dataclass(frozen=True, slots=True)
class AwsRuntimeConfig:
    """Where boto3 sends network document requests.

    Env vars:
      - AWS_REGION (default: eu-west-1)
      - ENDPOINT_URL: explicit endpoint, wins over everything else
      - USE_LOCALSTACK + LOCALSTACK_ENDPOINT_URL: LocalStack fallback
    """

    region: str
    endpoint_url: str | None = None

    @classmethod
    def from_env(cls) -> AwsRuntimeConfig:
        explicit = (os.getenv("ENDPOINT_URL") or "").strip()
        if explicit:
            return cls(region=_region(), endpoint_url=explicit)

        use_localstack = (os.getenv("USE_LOCALSTACK") or "").strip().lower()
        if use_localstack in _TRUTHY:
            endpoint = os.getenv("LOCALSTACK_ENDPOINT_URL") or _LOCALSTACK_DEFAULT
            return cls(region=_region(), endpoint_url=endpoint)

        return cls(region=_region())


def _region() -> str:
    return os.getenv("AWS_REGION") or "eu-west-1"


def s3_client(config: AwsRuntimeConfig | None = None) -> S3Client:
    cfg = config or AwsRuntimeConfig.from_env()
    session = boto3.session.Session(region_name=cfg.region)
    return session.client("s3", endpoint_url=cfg.endpoint_url)
