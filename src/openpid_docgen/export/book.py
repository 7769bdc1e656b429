"""mdbook output for a whole OpenPID spec.

Directory layout under the output root::

    book.toml
    src/SUMMARY.md
    src/about.md
    src/payloads/tx.md, src/payloads/rx.md
    src/payloads/<tx|rx>/<payload>.<ext>
    src/protocol/, src/structs/, src/transactions/

Chapter files listed in SUMMARY.md but not written here are created by
mdbook when it builds.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path

from openpid_docgen import __version__
from openpid_docgen.config import DocgenConfig
from openpid_docgen.model.payload import Direction, Payload
from openpid_docgen.model.spec import OpenPID
from openpid_docgen.render import build_site, render_diagram

from .markdown import PayloadDocument, document_payload

LOGGER = logging.getLogger(__name__)

Renderer = Callable[[str, Path], None]
SiteBuilder = Callable[[Path], None]

_SUMMARY_TEMPLATE = """\
# Contents
[Sending Packets](index.md)

# Packet Format
- [Sent Packets](protocol/tx.md)
- [Received Packets](protocol/rx.md)

# Payloads
- [Common Payload Structs](structs/index.md)
{payload_chapters}

# Transactions
[What is a transaction?]()
- [Transactions]()

----------
[About this Document](about.md)
"""

SUMMARY = _SUMMARY_TEMPLATE.format(
    payload_chapters="\n".join(
        f"- [{d.summary_title}](payloads/{d.path_component}.md)" for d in Direction
    )
)

_INDEX_BLURB: dict[Direction, str] = {
    Direction.TX: (
        "A payload is encapsulated by the Packet Format before it is sent.\n"
        "\n"
        'Sendable payloads are "sendable" from your controller to {device}.'
    ),
    Direction.RX: (
        "A payload is encapsulated by the Packet Format before it arrives at your controller.\n"
        "\n"
        'Receivable payloads are "received" by your controller from {device}.'
    ),
}


def _toml_str(value: str) -> str:
    # JSON string escapes are valid TOML basic-string escapes. TOML also
    # forbids a raw DEL, which JSON leaves unescaped.
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


class Book:
    """Writes the markdown sources and diagrams for one documentation run."""

    def __init__(
        self,
        root: Path | str,
        config: DocgenConfig | None = None,
        *,
        renderer: Renderer | None = None,
        site_builder: SiteBuilder | None = None,
    ) -> None:
        self.root = Path(root)
        self.config = config or DocgenConfig()
        self.src_path = self.root / "src"
        self.payloads_path = self.src_path / "payloads"
        self._renderer = renderer or partial(render_diagram, command=self.config.d2_command)
        self._site_builder = site_builder or partial(build_site, command=self.config.mdbook_command)

    def prepare(self) -> None:
        for direction in Direction:
            (self.payloads_path / direction.path_component).mkdir(parents=True, exist_ok=True)
        for section in ("protocol", "structs", "transactions"):
            (self.src_path / section).mkdir(parents=True, exist_ok=True)

    # -- Payloads -------------------------------------------------------------

    def document_payload(self, payload: Payload, name: str, direction: Direction) -> PayloadDocument:
        """Document one payload and render its diagram image."""
        doc = document_payload(
            payload,
            name,
            direction,
            image_extension=self.config.image_extension,
            budget=self.config.diagram_budget,
        )
        if doc.image_path is None:
            LOGGER.info("%s/%s has no known bit width; no diagram", direction.value, name)
        else:
            self._renderer(doc.diagram, self.payloads_path / doc.image_path)
        return doc

    def payload_index(self, pid: OpenPID, direction: Direction, docs: list[PayloadDocument]) -> str:
        blurb = _INDEX_BLURB[direction].format(device=pid.device_info.name)
        body = "".join(doc.markdown for doc in docs)
        return f"# {direction.index_title}\n{blurb}\n\n{body}\n"

    # -- Fixed pages ----------------------------------------------------------

    def about(self, pid: OpenPID) -> str:
        return (
            "# About this Document\n"
            "\n"
            f"This document was generated by OpenPID DocGen v{__version__}.\n"
            "\n"
            f'The document it was generated from was written in OpenPID "{pid.openpid_version}"\n'
            "\n"
            f'The document it was generated from\'s version was "{pid.doc_version}"\n'
        )

    def book_toml(self, pid: OpenPID) -> str:
        device = pid.device_info
        authors = ", ".join(_toml_str(a) for a in self.config.authors)
        description = f"Communication interface documentation for {device.name}: {device.description}"
        return (
            "[book]\n"
            f"title = {_toml_str(f'{device.name} - Interface Guide')}\n"
            f"authors = [{authors}]\n"
            f"description = {_toml_str(description)}\n"
            f"language = {_toml_str(self.config.language)}\n"
            'src = "src"\n'
        )

    # -- Run ------------------------------------------------------------------

    def write(self, pid: OpenPID) -> None:
        """Write every page and diagram. Stops at the first rendering failure."""
        self.prepare()
        for direction in Direction:
            docs = [
                self.document_payload(payload, name, direction)
                for name, payload in pid.payloads.for_direction(direction).items()
            ]
            index = self.payloads_path / f"{direction.path_component}.md"
            index.write_text(self.payload_index(pid, direction, docs), encoding="utf-8")
            LOGGER.info("wrote %d %s payloads to %s", len(docs), direction.value, index)

        (self.src_path / "SUMMARY.md").write_text(SUMMARY, encoding="utf-8")
        (self.src_path / "about.md").write_text(self.about(pid), encoding="utf-8")
        (self.root / "book.toml").write_text(self.book_toml(pid), encoding="utf-8")

    def build(self) -> None:
        LOGGER.info("building book in %s", self.root)
        self._site_builder(self.root)


def document(
    pid: OpenPID,
    path: Path | str,
    config: DocgenConfig | None = None,
    *,
    renderer: Renderer | None = None,
    site_builder: SiteBuilder | None = None,
) -> Book:
    """Generate the full book for *pid* under *path*."""
    book = Book(path, config, renderer=renderer, site_builder=site_builder)
    book.write(pid)
    if book.config.build_site:
        book.build()
    return book
