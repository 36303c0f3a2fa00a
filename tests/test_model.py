from __future__ import annotations

import dataclasses

import pytest

from eddyctl.core.model import BeaconObservation, BeaconType
from eddyctl.core.ranging import estimate_distance


def _uid(rssi: int = -70, tx_power: int = -50) -> BeaconObservation:
    return BeaconObservation(
        identifier=bytes(range(16)),
        beacon_type=BeaconType.UID,
        signal_strength=rssi,
        transmit_power=tx_power,
    )


def test_uid_namespace_and_instance_split() -> None:
    observation = _uid()
    assert observation.namespace == bytes(range(10))
    assert observation.instance == bytes(range(10, 16))
    assert observation.identifier_hex == "000102030405060708090a0b0c0d0e0f"


def test_observation_is_immutable() -> None:
    observation = _uid()
    with pytest.raises(dataclasses.FrozenInstanceError):
        observation.signal_strength = -10  # type: ignore[misc]


def test_with_telemetry_returns_copy() -> None:
    observation = _uid()
    enriched = observation.with_telemetry(bytearray(b"\x00\x0b\xb8"))
    assert enriched.telemetry == b"\x00\x0b\xb8"
    assert observation.telemetry is None
    assert enriched.identifier == observation.identifier


def test_distance_close_range() -> None:
    assert estimate_distance(-25, -50) == pytest.approx(0.5**10 / 1000)


def test_distance_far_range() -> None:
    expected = (0.89976 * 1.4**7.7095 + 0.111) / 1000
    assert _uid(rssi=-70, tx_power=-50).distance == pytest.approx(expected)


def test_distance_unknown_without_readings() -> None:
    assert estimate_distance(0, -50) is None
    assert estimate_distance(-60, 0) is None
    assert estimate_distance(-60, None) is None


@pytest.mark.parametrize(
    ("beacon_type", "length"),
    [
        (BeaconType.UID, 15),
        (BeaconType.UID, 17),
        (BeaconType.UID, 8),
        (BeaconType.EID, 7),
        (BeaconType.EID, 16),
        (BeaconType.EID, 0),
    ],
)
def test_identifier_length_must_match_beacon_type(beacon_type: BeaconType, length: int) -> None:
    with pytest.raises(ValueError, match="identifier must be"):
        BeaconObservation(
            identifier=b"\x01" * length,
            beacon_type=beacon_type,
            signal_strength=-70,
            transmit_power=-50,
        )


def test_replace_cannot_break_identifier_length() -> None:
    with pytest.raises(ValueError):
        dataclasses.replace(_uid(), identifier=b"\x01" * 15)


def test_eid_accepts_eight_byte_identifier() -> None:
    observation = BeaconObservation(
        identifier=bytes(8),
        beacon_type=BeaconType.EID,
        signal_strength=-70,
        transmit_power=-50,
    )
    assert len(observation.with_telemetry(b"\x00").identifier) == 8
