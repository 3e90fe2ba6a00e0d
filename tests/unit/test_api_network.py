from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from transitnet.adapters.api.dependencies import get_network_service
from transitnet.app.services.network_service import NetworkService
from transitnet.domain.codec import decode_network
from transitnet.domain.exceptions import AvailabilityError
from transitnet.domain.models import Network
from transitnet.main import app

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "valid_network.txt"


class _InMemoryNetworkRepository:
    def __init__(self, document: str) -> None:
        self.document = document

    def load_network(self) -> Network:
        return decode_network(self.document)

    def save_network(self, network: Network) -> None:
        raise AssertionError("Not used")


class _UnavailableNetworkRepository:
    def load_network(self) -> Network:
        raise AvailabilityError("Cannot read network document data/network.txt")

    def save_network(self, network: Network) -> None:
        raise AssertionError("Not used")


def _use_repository(repository) -> None:
    def _override():
        return NetworkService(repository=repository)

    app.dependency_overrides[get_network_service] = _override


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_network_returns_summary() -> None:
    _use_repository(_InMemoryNetworkRepository(FIXTURE.read_text(encoding="utf-8")))

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/network")

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    payload = resp.json()
    assert [s["name"] for s in payload["stops"]] == ["stop0", "stop1", "stop2", "stop3"]
    assert payload["stops"][0]["route_numbers"] == [1, 2]
    assert payload["routes"][0] == {
        "type": "train",
        "name": "red",
        "route_number": 1,
        "stops": ["stop0", "stop2", "stop1"],
        "vehicle_ids": [123, 42],
    }
    assert payload["vehicles"][2]["type"] == "bus"
    assert payload["vehicles"][2]["extra"] == "ABC123"
    assert payload["vehicles"][2]["current_stop"] == "stop1"


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_network_document_is_canonical_text() -> None:
    document = FIXTURE.read_text(encoding="utf-8")
    _use_repository(_InMemoryNetworkRepository(document.replace("\n", "\r\n")))

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/network/document")

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == document


@pytest.mark.unit
@pytest.mark.anyio
async def test_validate_accepts_a_valid_document() -> None:
    _use_repository(_UnavailableNetworkRepository())

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post(
            "/network/validate",
            json={"document": "1\nstop0:0:1\n1\nbus,red,1:stop0\n0\n"},
        )

    app.dependency_overrides.clear()

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["routes"][0]["stops"] == ["stop0"]
    assert payload["vehicles"] == []


@pytest.mark.unit
@pytest.mark.anyio
async def test_validate_rejects_a_malformed_document() -> None:
    _use_repository(_UnavailableNetworkRepository())

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post(
            "/network/validate",
            json={"document": "1\nstop0:0:1\n1\nbus,red,1:stop9\n0\n"},
        )

    app.dependency_overrides.clear()

    assert resp.status_code == 422
    assert "line 4" in resp.json()["detail"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_unavailable_document_is_503() -> None:
    _use_repository(_UnavailableNetworkRepository())

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/network")

    app.dependency_overrides.clear()

    assert resp.status_code == 503
    assert "data/network.txt" in resp.json()["detail"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_unexpected_errors_are_json() -> None:
    _use_repository(object())

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/network")

    app.dependency_overrides.clear()

    # object() has no load_network; the AttributeError is not revealed.
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal Server Error"}
