"""Protocol data model for OpenPID specs."""

from .device import DeviceInfo
from .payload import Direction, Payload, PayloadSet
from .segments import (
    NO_TERMINATION,
    PacketSegment,
    SizedSegment,
    StructSegment,
    UnsizedSegment,
    display_name,
    layout_width,
    normalize_segment,
)
from .spec import OpenPID

__all__ = [
    "DeviceInfo",
    "Direction",
    "NO_TERMINATION",
    "OpenPID",
    "PacketSegment",
    "Payload",
    "PayloadSet",
    "SizedSegment",
    "StructSegment",
    "UnsizedSegment",
    "display_name",
    "layout_width",
    "normalize_segment",
]
