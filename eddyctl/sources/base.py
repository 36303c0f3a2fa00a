"""Advertisement source interfaces."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from eddyctl.core.model import ScanRecord


class AdvertisementSource(Protocol):
    def records(self) -> Iterator[ScanRecord]:
        """Yield advertisements carrying service data, in arrival order."""
