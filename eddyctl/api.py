"""Stable public API for building tooling on top of eddyctl.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from pathlib import Path

from eddyctl.core.config import Config, LoadedConfig, load_config
from eddyctl.core.documents import parse_hex
from eddyctl.core.errors import (
    CaptureLoadError,
    CaptureValidationError,
    ConfigLoadError,
    ConfigValidationError,
    DecodeError,
    EddyctlError,
    InvalidHexError,
    InvalidSchemeError,
    MalformedURLError,
    TruncatedFrameError,
    UnrecognizedFrameTypeError,
    UrlEncodeError,
)
from eddyctl.core.frames import (
    classify,
    decode_eid,
    decode_empty,
    decode_frame,
    decode_telemetry,
    decode_uid,
    decode_url_frame,
)
from eddyctl.core.model import (
    BeaconObservation,
    BeaconType,
    EmptyFrame,
    Frame,
    FrameType,
    ScanRecord,
    TelemetryFrame,
    UrlFrame,
)
from eddyctl.core.service import DecodeOutcome, DecoderService
from eddyctl.core.service_data import (
    CONFIGURATION_SERVICE_UUID,
    EDDYSTONE_SERVICE_ID,
    EDDYSTONE_SERVICE_UUID,
    select_service_data,
)
from eddyctl.core.url_codec import decode_url, encode_url
from eddyctl.sources.base import AdvertisementSource
from eddyctl.sources.bleak_adv import record_from_advertisement
from eddyctl.sources.capture_file import CaptureFileSource

__all__ = [
    "EddyctlError",
    "DecodeError",
    "TruncatedFrameError",
    "InvalidSchemeError",
    "MalformedURLError",
    "UnrecognizedFrameTypeError",
    "UrlEncodeError",
    "InvalidHexError",
    "ConfigLoadError",
    "ConfigValidationError",
    "CaptureLoadError",
    "CaptureValidationError",
    "BeaconObservation",
    "BeaconType",
    "EmptyFrame",
    "Frame",
    "FrameType",
    "ScanRecord",
    "TelemetryFrame",
    "UrlFrame",
    "Config",
    "DecodeOutcome",
    "EDDYSTONE_SERVICE_ID",
    "EDDYSTONE_SERVICE_UUID",
    "CONFIGURATION_SERVICE_UUID",
    "classify",
    "decode_frame",
    "decode_uid",
    "decode_eid",
    "decode_url",
    "decode_url_frame",
    "decode_telemetry",
    "decode_empty",
    "encode_url",
    "select_service_data",
    "AdvertisementSource",
    "CaptureFileSource",
    "record_from_advertisement",
    "Client",
]


def _as_bytes(service_data: bytes | str) -> bytes:
    if isinstance(service_data, str):
        return parse_hex(service_data, context="service data")
    return bytes(service_data)


class Client:
    """Public client for decoding Eddystone advertisements.

    A `Client` bundles configuration with the decoder so that GUI/TUI tools,
    services and scripts can feed raw service data or whole scan records and
    get typed frames back.
    """

    def __init__(self, *, config: Config | None = None, loaded: LoadedConfig | None = None) -> None:
        if config is None:
            loaded = loaded or load_config()
            config = loaded.config
        self._service = DecoderService(config)

    @property
    def config(self) -> Config:
        return self._service.config

    def classify(self, service_data: bytes | str) -> FrameType:
        return classify(_as_bytes(service_data))

    def decode(self, service_data: bytes | str, rssi: int = 0) -> Frame | DecodeError:
        return decode_frame(_as_bytes(service_data), rssi)

    def process(self, record: ScanRecord) -> DecodeOutcome | None:
        return self._service.process(record)

    def replay(self, path: Path) -> list[DecodeOutcome]:
        return self._service.process_source(CaptureFileSource(path))

    def encode_url(self, url: str, *, tx_power: int = 0) -> bytes:
        """Build a complete URL frame (frame type, tx power, scheme, body)."""
        if not -128 <= tx_power <= 127:
            raise UrlEncodeError(f"Transmit power {tx_power} does not fit in a signed byte")
        return bytes([FrameType.URL.value, tx_power & 0xFF]) + encode_url(url)
