"""Markdown documentation for a single payload.

Produces the page fragment for one payload together with the D2 source of
its segment diagram. Writing the diagram image is left to the caller.
"""

from __future__ import annotations

from typing import assert_never

from pydantic import BaseModel, ConfigDict

from openpid_docgen.config import DEFAULT_DIAGRAM_BUDGET, DEFAULT_IMAGE_EXTENSION
from openpid_docgen.model.payload import Direction, Payload
from openpid_docgen.model.segments import (
    PacketSegment,
    SizedSegment,
    StructSegment,
    UnsizedSegment,
    display_name,
    layout_width,
)

from .d2 import generate_packet_diagram


class PayloadDocument(BaseModel):
    """Rendered documentation for one payload.

    ``image_path`` is relative to the payloads directory and is None when
    the payload has no known bit width (``diagram`` is then empty).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    direction: Direction
    markdown: str
    diagram: str
    image_path: str | None = None


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------

def segment_description(segment: PacketSegment) -> str:
    if isinstance(segment, SizedSegment):
        return f"*{segment.bits}* bit-wide {segment.datatype}\n{segment.description or ''}\n"
    elif isinstance(segment, UnsizedSegment):
        return (
            f"{segment.datatype} with {segment.termination_text}\n"
            f"{segment.description or ''}\n"
        )
    elif isinstance(segment, StructSegment):
        return f"See struct [{segment.struct_name}]({segment.link_target})"
    else:
        assert_never(segment)


def segment_diagram_entry(segment: PacketSegment) -> tuple[str, int | None]:
    """``(label, bits)`` pair handed to the diagram layout."""
    if isinstance(segment, SizedSegment):
        label = f"{segment.name} ({segment.datatype})"
    elif isinstance(segment, UnsizedSegment):
        label = f"{segment.name} ({segment.datatype})"
    elif isinstance(segment, StructSegment):
        # TODO: resolve the referenced struct so sized structs get a real width
        if segment.name == segment.struct_name:
            label = segment.name
        else:
            label = f"{segment.name} ({segment.struct_name})"
    else:
        assert_never(segment)
    return label, layout_width(segment)


def segment_section(segment: PacketSegment) -> str:
    return f"### {display_name(segment)}\n{segment_description(segment)}"


# ---------------------------------------------------------------------------
# Payload
# ---------------------------------------------------------------------------

def image_path(name: str, direction: Direction, extension: str = DEFAULT_IMAGE_EXTENSION) -> str:
    """Diagram location relative to the payloads directory."""
    return f"{direction.path_component}/{name}.{extension}"


def render_metadata(payload: Payload) -> str:
    return repr(payload.metadata)


def document_payload(
    payload: Payload,
    name: str,
    direction: Direction,
    *,
    image_extension: str = DEFAULT_IMAGE_EXTENSION,
    budget: int = DEFAULT_DIAGRAM_BUDGET,
) -> PayloadDocument:
    """Build the markdown fragment and diagram source for one payload."""
    diagram = generate_packet_diagram(
        name,
        [segment_diagram_entry(s) for s in payload.segments],
        budget=budget,
    )
    rel_path = image_path(name, direction, image_extension) if diagram else None

    lines = [f"# {name}", payload.description, "", "## Payload Segments"]
    if rel_path is not None:
        lines.append(f"![Packet Segment Description for {name}]({rel_path})")
    lines.append("\n".join(segment_section(s) for s in payload.segments))
    lines += ["", "", "## Hard-coded Values", render_metadata(payload), "", "", ""]

    return PayloadDocument(
        name=name,
        direction=direction,
        markdown="\n".join(lines),
        diagram=diagram,
        image_path=rel_path,
    )
