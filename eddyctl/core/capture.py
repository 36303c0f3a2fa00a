"""Loading recorded advertisements from YAML capture files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from eddyctl.core.documents import parse_hex, read_yaml, validate_document
from eddyctl.core.errors import CaptureLoadError, CaptureValidationError
from eddyctl.core.model import ScanRecord

_SCHEMA_NAME = "capture.schema.json"


def _build_record(index: int, doc: dict[str, Any]) -> ScanRecord:
    service_data = {
        uuid: parse_hex(
            payload,
            context=f"records[{index}].service_data.{uuid}",
            error=CaptureValidationError,
        )
        for uuid, payload in doc["service_data"].items()
    }
    return ScanRecord(
        rssi=int(doc["rssi"]),
        service_data=service_data,
        address=doc.get("address"),
    )


def load_capture(path: Path) -> list[ScanRecord]:
    doc = read_yaml(path, load_error=CaptureLoadError, validation_error=CaptureValidationError)
    validate_document(doc, _SCHEMA_NAME, path, validation_error=CaptureValidationError)
    return [_build_record(index, record) for index, record in enumerate(doc["records"])]
