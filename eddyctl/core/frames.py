"""Eddystone frame classification and field extraction.

Every operation here is pure: it reads a service-data buffer and returns
either a decoded value or a ``DecodeError`` instance. Nothing is raised for
malformed radio input.
"""

from __future__ import annotations

from eddyctl.core.errors import DecodeError, TruncatedFrameError, UnrecognizedFrameTypeError
from eddyctl.core.model import (
    EID_IDENTIFIER_LENGTH,
    UID_IDENTIFIER_LENGTH,
    BeaconObservation,
    BeaconType,
    EmptyFrame,
    Frame,
    FrameType,
    TelemetryFrame,
    UrlFrame,
)
from eddyctl.core.url_codec import decode_url

TX_POWER_OFFSET = 1
IDENTIFIER_OFFSET = 2

_FRAME_TYPES = {
    frame_type.value: frame_type
    for frame_type in FrameType
    if frame_type is not FrameType.UNKNOWN
}


def _tx_power(service_data: bytes) -> int:
    return int.from_bytes(service_data[TX_POWER_OFFSET : TX_POWER_OFFSET + 1], "big", signed=True)


def classify(service_data: bytes) -> FrameType:
    if not service_data:
        return FrameType.UNKNOWN
    return _FRAME_TYPES.get(service_data[0], FrameType.UNKNOWN)


def _decode_identified(
    service_data: bytes,
    rssi: int,
    *,
    beacon_type: BeaconType,
    identifier_length: int,
) -> BeaconObservation | DecodeError:
    required = IDENTIFIER_OFFSET + identifier_length
    if len(service_data) < required:
        return TruncatedFrameError(
            f"{beacon_type.name} frame needs at least {required} bytes, got {len(service_data)}"
        )
    return BeaconObservation(
        identifier=bytes(service_data[IDENTIFIER_OFFSET:required]),
        beacon_type=beacon_type,
        signal_strength=rssi,
        transmit_power=_tx_power(service_data),
    )


def decode_uid(service_data: bytes, rssi: int) -> BeaconObservation | DecodeError:
    """Decode a UID frame; the two trailing reserved bytes are optional."""
    return _decode_identified(
        service_data,
        rssi,
        beacon_type=BeaconType.UID,
        identifier_length=UID_IDENTIFIER_LENGTH,
    )


def decode_eid(service_data: bytes, rssi: int) -> BeaconObservation | DecodeError:
    """Decode an EID frame. The ephemeral identifier is not authenticated."""
    return _decode_identified(
        service_data,
        rssi,
        beacon_type=BeaconType.EID,
        identifier_length=EID_IDENTIFIER_LENGTH,
    )


def decode_url_frame(service_data: bytes) -> UrlFrame | DecodeError:
    url = decode_url(service_data)
    if isinstance(url, DecodeError):
        return url
    return UrlFrame(url=url, transmit_power=_tx_power(service_data))


def decode_telemetry(service_data: bytes) -> TelemetryFrame | DecodeError:
    if not service_data:
        return TruncatedFrameError("Telemetry frame is empty")
    return TelemetryFrame(payload=bytes(service_data[1:]))


def decode_empty(service_data: bytes) -> EmptyFrame | DecodeError:
    if not service_data:
        return TruncatedFrameError("Empty frame has no frame type byte")
    return EmptyFrame()


def decode_frame(service_data: bytes, rssi: int = 0) -> Frame | DecodeError:
    frame_type = classify(service_data)
    if frame_type is FrameType.UID:
        return decode_uid(service_data, rssi)
    if frame_type is FrameType.EID:
        return decode_eid(service_data, rssi)
    if frame_type is FrameType.URL:
        return decode_url_frame(service_data)
    if frame_type is FrameType.TELEMETRY:
        return decode_telemetry(service_data)
    if frame_type is FrameType.EMPTY:
        return decode_empty(service_data)
    if frame_type is FrameType.UNKNOWN:
        leading = f"0x{service_data[0]:02x}" if service_data else "<empty buffer>"
        return UnrecognizedFrameTypeError(f"Unrecognized Eddystone frame type {leading}")
    raise AssertionError(f"Unhandled frame type {frame_type}")
