from __future__ import annotations

from transitnet.domain.models import ConcessionPassenger, Passenger, Stop


def test_passenger_name_is_cleaned() -> None:
    assert Passenger("\rAbel\nSmith").name == "AbelSmith"
    assert Passenger(None).name == ""  # type: ignore[arg-type]


def test_passenger_str_mentions_destination() -> None:
    lakes = Stop("UQ Lakes", 23, 56)

    assert str(Passenger("Abel")) == "Passenger named Abel"
    assert str(Passenger("Abel", lakes)) == "Passenger named Abel travelling to UQ Lakes"


def test_concession_expires_and_renews() -> None:
    passenger = ConcessionPassenger("Abel Smith", Stop("UQ Lakes", 23, 56), 421314)
    assert passenger.is_valid
    assert passenger.destination is not None

    passenger.expire()
    assert not passenger.is_valid

    passenger.renew(421413)
    assert passenger.is_valid
    assert passenger.concession_id == 421413


def test_concession_renewal_outside_window_is_refused() -> None:
    passenger = ConcessionPassenger("Abel Smith", Stop("UQ Lakes", 23, 56), 421314)

    passenger.renew(431413)

    assert not passenger.is_valid
    assert passenger.concession_id == 421314
