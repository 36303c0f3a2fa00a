"""Eddystone service identifiers and service-data selection."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from eddyctl.core.errors import ConfigValidationError

EDDYSTONE_SERVICE_ID = "FEAA"
BLUETOOTH_BASE_UUID_SUFFIX = "-0000-1000-8000-00805f9b34fb"
EDDYSTONE_SERVICE_UUID = "0000feaa" + BLUETOOTH_BASE_UUID_SUFFIX
CONFIGURATION_SERVICE_UUID = "a3c87500-8ed3-4bdf-8a39-a01bebede295"
DEFAULT_SERVICE_UUIDS = (EDDYSTONE_SERVICE_UUID, CONFIGURATION_SERVICE_UUID)

_SHORT_UUID_RE = re.compile(r"^(?:0x)?([0-9a-f]{4}|[0-9a-f]{8})$")
_FULL_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")
LOGGER = logging.getLogger(__name__)


def normalize_uuid(value: str) -> str:
    """Return the lowercase 128-bit form of a 16, 32 or 128-bit UUID string."""
    normalized = value.strip().lower()
    if _FULL_UUID_RE.match(normalized):
        return normalized
    short = _SHORT_UUID_RE.match(normalized)
    if short:
        return short.group(1).rjust(8, "0") + BLUETOOTH_BASE_UUID_SUFFIX
    raise ConfigValidationError(
        f"'{value}' must be a 16-bit, 32-bit, or 128-bit UUID string"
    )


def _index_by_uuid(service_data: Mapping[str, bytes]) -> dict[str, bytes]:
    indexed: dict[str, bytes] = {}
    for uuid, payload in service_data.items():
        try:
            indexed[normalize_uuid(uuid)] = bytes(payload)
        except ConfigValidationError:
            LOGGER.debug("Ignoring service data under malformed UUID %r", uuid)
            continue
    return indexed


def select_service_data(
    service_data: Mapping[str, bytes],
    accepted: Iterable[str] = DEFAULT_SERVICE_UUIDS,
) -> bytes | None:
    """Pick the Eddystone payload out of an advertisement's service data.

    Accepted UUIDs are tried in order; an empty payload under one UUID falls
    through to the next.
    """
    indexed = _index_by_uuid(service_data)
    for uuid in accepted:
        payload = indexed.get(normalize_uuid(uuid))
        if payload:
            return payload
    return None
