"""Core data models used across decoder, service, and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from eddyctl.core.ranging import estimate_distance

UID_NAMESPACE_LENGTH = 10
UID_IDENTIFIER_LENGTH = 16
EID_IDENTIFIER_LENGTH = 8


class FrameType(Enum):
    UID = 0x00
    URL = 0x10
    TELEMETRY = 0x20
    EID = 0x30
    EMPTY = 0x40
    UNKNOWN = None


class BeaconType(Enum):
    UID = 1
    EID = 2


IDENTIFIER_LENGTHS = {
    BeaconType.UID: UID_IDENTIFIER_LENGTH,
    BeaconType.EID: EID_IDENTIFIER_LENGTH,
}


@dataclass(frozen=True)
class BeaconObservation:
    """A UID or EID beacon as seen in one advertisement."""

    identifier: bytes
    beacon_type: BeaconType
    signal_strength: int
    transmit_power: int
    telemetry: bytes | None = None

    def __post_init__(self) -> None:
        expected = IDENTIFIER_LENGTHS[self.beacon_type]
        if len(self.identifier) != expected:
            raise ValueError(
                f"{self.beacon_type.name} identifier must be {expected} bytes, got {len(self.identifier)}"
            )

    @property
    def identifier_hex(self) -> str:
        return self.identifier.hex()

    @property
    def namespace(self) -> bytes | None:
        if self.beacon_type is not BeaconType.UID:
            return None
        return self.identifier[:UID_NAMESPACE_LENGTH]

    @property
    def instance(self) -> bytes | None:
        if self.beacon_type is not BeaconType.UID:
            return None
        return self.identifier[UID_NAMESPACE_LENGTH:]

    @property
    def distance(self) -> float | None:
        return estimate_distance(self.signal_strength, self.transmit_power)

    def with_telemetry(self, payload: bytes) -> BeaconObservation:
        return replace(self, telemetry=bytes(payload))


@dataclass(frozen=True)
class UrlFrame:
    url: str
    transmit_power: int


@dataclass(frozen=True)
class TelemetryFrame:
    payload: bytes


@dataclass(frozen=True)
class EmptyFrame:
    pass


Frame = BeaconObservation | UrlFrame | TelemetryFrame | EmptyFrame


@dataclass(frozen=True)
class ScanRecord:
    """One advertisement handed over by the scanning layer."""

    rssi: int
    service_data: dict[str, bytes] = field(default_factory=dict)
    address: str | None = None
