"""openpid_docgen export: diagrams and markdown from an OpenPID spec.

Public API::

    from openpid_docgen.export import document, generate_packet_diagram
    d2_source = generate_packet_diagram("Ping", [("opcode (u8)", 8)])
    document(pid, "outputs")
"""

from .book import Book, document
from .d2 import DEFAULT_DIAGRAM_BUDGET, generate_packet_diagram
from .markdown import PayloadDocument, document_payload

__all__ = [
    "Book",
    "DEFAULT_DIAGRAM_BUDGET",
    "PayloadDocument",
    "document",
    "document_payload",
    "generate_packet_diagram",
]
