from __future__ import annotations

import logging
import os
from contextlib import closing
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from transitnet.adapters.aws import s3_client
from transitnet.app.ports.output import INetworkRepository
from transitnet.domain.codec import decode_network, encode_network
from transitnet.domain.exceptions import AvailabilityError, FormatError
from transitnet.domain.models import Network

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class S3NetworkRepository(INetworkRepository):
    """Network document stored as a single S3 object.

    Env vars:
      - NETWORK_BUCKET: bucket name
      - NETWORK_KEY: object key (default: networks/network.txt)
      - ENDPOINT_URL / USE_LOCALSTACK / AWS_REGION: see transitnet.adapters.aws
    """

    bucket: str | None = None
    key: str | None = None
    client: Any | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("NETWORK_BUCKET")
        if not value:
            raise RuntimeError("Missing NETWORK_BUCKET")
        return value

    def _key(self) -> str:
        return (self.key or os.getenv("NETWORK_KEY") or "networks/network.txt").lstrip(
            "/"
        )

    def _s3(self) -> Any:
        return self.client if self.client is not None else s3_client()

    def load_network(self) -> Network:
        bucket = self._bucket()
        key = self._key()

        try:
            obj = self._s3().get_object(Bucket=bucket, Key=key)
            with closing(obj["Body"]) as stream:
                body = stream.read()
        except (BotoCoreError, ClientError) as exc:
            raise AvailabilityError(f"Cannot read s3://{bucket}/{key}: {exc}") from exc

        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(f"s3://{bucket}/{key} is not valid UTF-8 text") from exc

        network = decode_network(text)
        logger.info("Loaded network from s3://%s/%s", bucket, key)
        return network

    def save_network(self, network: Network) -> None:
        bucket = self._bucket()
        key = self._key()
        payload = encode_network(network).encode("utf-8")

        try:
            self._s3().put_object(
                Bucket=bucket,
                Key=key,
                Body=payload,
                ContentType="text/plain; charset=utf-8",
            )
        except (BotoCoreError, ClientError) as exc:
            raise AvailabilityError(f"Cannot write s3://{bucket}/{key}: {exc}") from exc
        logger.info("Saved network to s3://%s/%s", bucket, key)
