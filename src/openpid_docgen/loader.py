"""Reading OpenPID specs from TOML."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from openpid_docgen.model.spec import OpenPID

LOGGER = logging.getLogger(__name__)


class SpecError(ValueError):
    """The spec could not be read or does not have the expected shape."""


def parse_spec(text: str, *, source: str = "<string>") -> OpenPID:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise SpecError(f"{source}: invalid TOML: {exc}") from exc
    try:
        return OpenPID.model_validate(data)
    except ValidationError as exc:
        raise SpecError(f"{source}: {exc}") from exc


def load_spec(path: Path | str) -> OpenPID:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecError(f"cannot read spec {path}: {exc}") from exc
    pid = parse_spec(text, source=str(path))
    LOGGER.info(
        "loaded %s: %d outbound, %d inbound payloads",
        path,
        len(pid.payloads.tx),
        len(pid.payloads.rx),
    )
    return pid
