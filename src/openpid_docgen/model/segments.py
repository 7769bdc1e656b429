"""Packet segments: the typed pieces a payload is laid out from.

A segment is one of three shapes:
- SizedSegment: a fixed number of bits of some datatype.
- UnsizedSegment: a variable-length run of some datatype, optionally
  ended by a termination rule.
- StructSegment: a reference, by name, to a reusable struct defined
  elsewhere in the spec. The reference is never resolved here.

Consumers dispatch over the three shapes with isinstance checks ending in
``assert_never`` so a new shape shows up in the type checker at every site.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union, assert_never

from pydantic import BaseModel, ConfigDict, Field


NO_TERMINATION = "no additional termination"


class SizedSegment(BaseModel):
    """Fixed-width segment. ``bits`` is expected to be positive but not checked."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sized"] = "sized"
    name: str
    bits: int
    datatype: str
    description: str | None = None


class UnsizedSegment(BaseModel):
    """Variable-width segment, optionally terminated (e.g. null-terminated)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unsized"] = "unsized"
    name: str
    termination: str | None = None
    datatype: str
    description: str | None = None

    @property
    def termination_text(self) -> str:
        return self.termination if self.termination is not None else NO_TERMINATION


class StructSegment(BaseModel):
    """Segment whose layout is a named reusable struct."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["struct"] = "struct"
    name: str
    struct_name: str

    @property
    def link_target(self) -> str:
        return self.struct_name


PacketSegment = Annotated[
    Union[SizedSegment, UnsizedSegment, StructSegment],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Externally tagged input
# ---------------------------------------------------------------------------

_EXTERNAL_TAGS: dict[str, str] = {
    "Sized": "sized",
    "Unsized": "unsized",
    "Struct": "struct",
}


def normalize_segment(raw: Any) -> Any:
    """Rewrite ``{"Sized": {...}}`` into ``{"kind": "sized", ...}``.

    Anything that is not a single-key mapping keyed by a known variant
    name is returned untouched so pydantic reports the real problem.
    """
    if not isinstance(raw, dict) or "kind" in raw or len(raw) != 1:
        return raw
    (tag, body), = raw.items()
    if tag not in _EXTERNAL_TAGS:
        return raw
    if not isinstance(body, dict):
        raise ValueError(f"segment variant '{tag}' must be a table, got {type(body).__name__}")
    if "kind" in body:
        raise ValueError(f"segment variant '{tag}' must not also set 'kind'")
    return {"kind": _EXTERNAL_TAGS[tag], **body}


# ---------------------------------------------------------------------------
# Per-variant accessors
# ---------------------------------------------------------------------------

def display_name(segment: SizedSegment | UnsizedSegment | StructSegment) -> str:
    """Heading name for a segment.

    Falls back to the struct name when a struct segment was given an empty name.
    """
    if isinstance(segment, SizedSegment):
        return segment.name
    elif isinstance(segment, UnsizedSegment):
        return segment.name
    elif isinstance(segment, StructSegment):
        return segment.name or segment.struct_name
    else:
        assert_never(segment)


def layout_width(segment: SizedSegment | UnsizedSegment | StructSegment) -> int | None:
    """Bits the segment contributes to a diagram, or None when unknown."""
    if isinstance(segment, SizedSegment):
        return segment.bits
    elif isinstance(segment, UnsizedSegment):
        return None
    elif isinstance(segment, StructSegment):
        # Referenced structs are not resolved, so their width is unknown.
        return None
    else:
        assert_never(segment)
