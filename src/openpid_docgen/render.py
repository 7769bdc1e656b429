"""External tools: the d2 diagram renderer and the mdbook site builder.

Both are one-shot blocking process calls. Any failure to start, a non-zero
exit status, or a missing output is raised as ``RenderError``.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class RenderError(OSError):
    """An external rendering or build step failed."""


def _run(args: list[str], *, input_text: str | None = None) -> None:
    LOGGER.debug("running %s", " ".join(args))
    try:
        proc = subprocess.run(
            args,
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
    except FileNotFoundError as exc:
        raise RenderError(f"'{args[0]}' not found; is it installed and on PATH?") from exc
    except OSError as exc:
        raise RenderError(f"could not run '{args[0]}': {exc}") from exc

    if proc.returncode != 0:
        detail = (proc.stderr or proc.stdout or "").strip()
        message = f"'{args[0]}' exited with status {proc.returncode}"
        if detail:
            message += f": {detail}"
        raise RenderError(message)


def render_diagram(diagram: str, path: Path | str, *, command: str = "d2") -> None:
    """Render D2 source to an image at *path*.

    The source is passed on stdin (``d2 - <path>``).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _run([command, "-", str(path)], input_text=diagram)
    if not path.exists():
        raise RenderError(f"'{command}' reported success but did not write {path}")
    LOGGER.info("rendered diagram %s", path)


def build_site(root: Path | str, *, command: str = "mdbook") -> None:
    """Build the book rooted at *root* (the directory holding book.toml)."""
    _run([command, "build", str(root)])
    LOGGER.info("built book in %s", Path(root) / "book")
