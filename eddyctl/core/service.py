"""Service layer used by the CLI and the public client."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from eddyctl.core.config import Config
from eddyctl.core.errors import DecodeError
from eddyctl.core.frames import classify, decode_frame
from eddyctl.core.model import Frame, FrameType, ScanRecord
from eddyctl.core.service_data import select_service_data
from eddyctl.sources.base import AdvertisementSource

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeOutcome:
    record: ScanRecord
    frame_type: FrameType
    frame: Frame | None = None
    error: DecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DecoderService:
    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    def process(self, record: ScanRecord) -> DecodeOutcome | None:
        payload = select_service_data(record.service_data, self.config.service_uuids)
        if payload is None:
            LOGGER.debug("No Eddystone service data from %s", record.address or "<unknown>")
            return None

        frame_type = classify(payload)
        if frame_type is FrameType.UNKNOWN and self.config.drop_unknown_frames:
            LOGGER.debug(
                "Dropping unrecognized frame from %s: %s",
                record.address or "<unknown>",
                payload.hex(),
            )
            return None

        result = decode_frame(payload, record.rssi)
        if isinstance(result, DecodeError):
            LOGGER.warning(
                "Discarding %s frame from %s: %s",
                frame_type.name,
                record.address or "<unknown>",
                result,
            )
            return DecodeOutcome(record=record, frame_type=frame_type, error=result)
        return DecodeOutcome(record=record, frame_type=frame_type, frame=result)

    def process_all(self, records: Iterable[ScanRecord]) -> list[DecodeOutcome]:
        outcomes: list[DecodeOutcome] = []
        for record in records:
            outcome = self.process(record)
            if outcome is not None:
                outcomes.append(outcome)
        return outcomes

    def process_source(self, source: AdvertisementSource) -> list[DecodeOutcome]:
        return self.process_all(source.records())
