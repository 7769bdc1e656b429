"""Device metadata for an OpenPID spec."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DeviceInfo(BaseModel):
    """The peripheral being documented."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
