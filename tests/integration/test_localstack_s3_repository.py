from __future__ import annotations

from pathlib import Path
from uuid import uuid4

import pytest

from transitnet.adapters.persistence import S3NetworkRepository
from transitnet.domain.codec import decode_network, encode_network
from transitnet.domain.exceptions import AvailabilityError

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "valid_network.txt"


@pytest.mark.integration
def test_s3_network_repository_save_and_load(network_bucket: str) -> None:
    key = f"networks-test/{uuid4()}.txt"
    document = FIXTURE.read_text(encoding="utf-8")

    repo = S3NetworkRepository(bucket=network_bucket, key=key)
    repo.save_network(decode_network(document))
    loaded = repo.load_network()

    assert encode_network(loaded) == document
    assert [v.id for v in loaded.routes[0].transports] == [123, 42]


@pytest.mark.integration
def test_s3_network_repository_missing_object(network_bucket: str) -> None:
    repo = S3NetworkRepository(bucket=network_bucket, key=f"absent/{uuid4()}.txt")

    with pytest.raises(AvailabilityError):
        repo.load_network()
