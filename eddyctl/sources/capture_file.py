"""Advertisement source replaying a YAML capture file."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from eddyctl.core.capture import load_capture
from eddyctl.core.model import ScanRecord


class CaptureFileSource:
    def __init__(self, path: Path) -> None:
        self.path = path

    def records(self) -> Iterator[ScanRecord]:
        yield from load_capture(self.path)
