"""Payloads and the per-direction payload sets."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .segments import PacketSegment, normalize_segment


class Direction(str, Enum):
    """Which way a payload travels. Only affects where output is placed."""

    TX = "tx"
    RX = "rx"

    @property
    def path_component(self) -> str:
        return self.value

    @property
    def summary_title(self) -> str:
        return "To Device" if self is Direction.TX else "From Device"

    @property
    def index_title(self) -> str:
        return "Sendable Payloads" if self is Direction.TX else "Receivable Payloads"


class Payload(BaseModel):
    """One message body. ``segments`` are in on-wire order."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    metadata: Any = None
    segments: list[PacketSegment] = []

    @field_validator("segments", mode="before")
    @classmethod
    def _normalize_segments(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [normalize_segment(item) for item in value]
        return value


class PayloadSet(BaseModel):
    """Outbound (``tx``) and inbound (``rx``) payloads keyed by name.

    The two mappings are separate namespaces. Iteration follows insertion
    order, which is the order the payloads appear in the spec.
    """

    model_config = ConfigDict(frozen=True)

    tx: dict[str, Payload] = {}
    rx: dict[str, Payload] = {}

    def for_direction(self, direction: Direction) -> dict[str, Payload]:
        if direction is Direction.TX:
            return self.tx
        return self.rx

    def items(self) -> Iterator[tuple[Direction, str, Payload]]:
        """Yield every payload, all of ``tx`` before any of ``rx``."""
        for direction in Direction:
            for name, payload in self.for_direction(direction).items():
                yield direction, name, payload
