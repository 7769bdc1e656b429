"""D2 diagram description for packet-like layouts.

Each entry becomes one block in a single-row grid. Block widths are
proportional to bit width: ``scale = budget // total`` where ``total`` is
the sum of known widths, a sized block is ``bits * scale`` wide and a
variable block is ``16 * scale`` wide. Variable entries do not count toward
``total``. When ``total`` is zero no diagram is produced.
"""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO

from openpid_docgen.config import DEFAULT_DIAGRAM_BUDGET

VARIABLE_NOMINAL_BITS = 16

LAYOUT_ENGINE = "elk"
THEME_ID = 0
TITLE_FONT_SIZE = 50
CAPTION_FONT_SIZE = 40
EXPLANATION_FONT_SIZE = 55


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_packet_diagram(
    name: str,
    contents: Sequence[tuple[str, int | None]],
    *,
    budget: int = DEFAULT_DIAGRAM_BUDGET,
) -> str:
    """Lay out ``(label, bits)`` pairs as a D2 grid titled *name*.

    Returns an empty string when no entry has a known width.
    """
    total = total_bit_width(contents)
    if total == 0:
        return ""

    scale = budget // total
    w = D2Writer()
    w.write_config()
    w.open_container(name)
    for idx, (label, bits) in enumerate(contents):
        w.write_block(idx, label, bits, scaled_width(bits, scale))
    w.close_container()
    return w.getvalue()


def total_bit_width(contents: Sequence[tuple[str, int | None]]) -> int:
    return sum(bits for _, bits in contents if bits is not None)


def scaled_width(bits: int | None, scale: int) -> int:
    if bits is None:
        return VARIABLE_NOMINAL_BITS * scale
    return bits * scale


def size_caption(bits: int | None) -> str:
    if bits is None:
        return "Variable"
    return f"{bits} bits"


# ---------------------------------------------------------------------------
# D2Writer
# ---------------------------------------------------------------------------

class D2Writer:
    """Emits D2 source into an internal buffer."""

    def __init__(self) -> None:
        self._buf = StringIO()
        self._indent = 0
        self._indent_str = "  "

    def getvalue(self) -> str:
        return self._buf.getvalue().rstrip("\n") + "\n"

    # -- Low-level output helpers -------------------------------------------

    def _line(self, text: str = "") -> None:
        if text:
            self._buf.write(self._indent_str * self._indent + text + "\n")
        else:
            self._buf.write("\n")

    def _open(self, key: str) -> None:
        self._line(f"{key}: {{")
        self._indent += 1

    def _close(self) -> None:
        self._indent = max(0, self._indent - 1)
        self._line("}")

    # -- Sections -------------------------------------------------------------

    def write_config(self) -> None:
        self._open("vars")
        self._open("d2-config")
        self._line(f"layout-engine: {LAYOUT_ENGINE}")
        self._line(f"theme-id: {THEME_ID}")
        self._close()
        self._close()
        self._line()

    def open_container(self, name: str) -> None:
        self._open(name)
        self._line(f"style.font-size: {TITLE_FONT_SIZE}")
        self._line("grid-rows: 1")
        self._line("grid-gap: 0")

    def close_container(self) -> None:
        self._close()

    def write_block(self, idx: int, label: str, bits: int | None, width: int) -> None:
        self._line()
        self._line(f"{idx}: {size_caption(bits)}")
        self._open(str(idx))
        self._line(f"explanation: |md {label} |")
        self._line(f"explanation.style.font-size: {EXPLANATION_FONT_SIZE}")
        self._line(f"width: {width}")
        self._line(f"style.font-size: {CAPTION_FONT_SIZE}")
        self._close()
