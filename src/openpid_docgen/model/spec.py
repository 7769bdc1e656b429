"""Top-level OpenPID document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .device import DeviceInfo
from .payload import PayloadSet


class OpenPID(BaseModel):
    """A device's protocol description. Version strings are carried opaquely."""

    model_config = ConfigDict(frozen=True)

    openpid_version: str
    doc_version: str
    device_info: DeviceInfo
    payloads: PayloadSet = PayloadSet()
