"""Shared test helpers for the openpid_docgen test suite."""

from pathlib import Path

import pytest

from openpid_docgen.model import (
    DeviceInfo,
    OpenPID,
    Payload,
    PayloadSet,
    SizedSegment,
    StructSegment,
    UnsizedSegment,
)
from openpid_docgen.render import RenderError


def sized(name, bits, datatype="u8", description=None):
    return SizedSegment(name=name, bits=bits, datatype=datatype, description=description)


def unsized(name, datatype="ascii", termination=None, description=None):
    return UnsizedSegment(
        name=name, datatype=datatype, termination=termination, description=description
    )


def struct(name, struct_name=None):
    return StructSegment(name=name, struct_name=struct_name or name)


def make_pid(tx=None, rx=None, name="Probe"):
    return OpenPID(
        openpid_version="0.1",
        doc_version="1.2.0",
        device_info=DeviceInfo(name=name, description="A test device"),
        payloads=PayloadSet(tx=tx or {}, rx=rx or {}),
    )


class FakeRenderer:
    """Stands in for d2: records calls and writes a placeholder image."""

    def __init__(self, fail_on: str | None = None):
        self.calls: list[tuple[str, Path]] = []
        self.fail_on = fail_on

    def __call__(self, diagram: str, path: Path) -> None:
        if self.fail_on is not None and path.stem == self.fail_on:
            raise RenderError(f"d2 failed for {path}")
        self.calls.append((diagram, path))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"PNG")


@pytest.fixture
def ping():
    return Payload(
        description="Liveness check",
        segments=[sized("opcode", 8, "u8"), sized("seq", 16, "u16", "sequence number")],
    )
