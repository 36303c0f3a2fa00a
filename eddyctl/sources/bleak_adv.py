"""Conversion of bleak advertisement callbacks into scan records.

Only the ``address`` of the device and the ``rssi``/``service_data``
attributes of the advertisement are read, so bleak itself is not imported.
"""

from __future__ import annotations

from typing import Any

from eddyctl.core.model import ScanRecord


def record_from_advertisement(device: Any, advertisement_data: Any) -> ScanRecord:
    service_data = {
        str(uuid): bytes(payload)
        for uuid, payload in (getattr(advertisement_data, "service_data", None) or {}).items()
    }
    rssi = getattr(advertisement_data, "rssi", None)
    if rssi is None:
        rssi = getattr(device, "rssi", 0) or 0
    return ScanRecord(
        rssi=int(rssi),
        service_data=service_data,
        address=getattr(device, "address", None),
    )
