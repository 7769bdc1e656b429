"""Settings for a documentation run."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

LOGGER = logging.getLogger(__name__)

DEFAULT_DIAGRAM_BUDGET = 2000
DEFAULT_IMAGE_EXTENSION = "png"

ENV_OVERRIDES: dict[str, str] = {
    "OPENPID_DOCGEN_D2": "d2_command",
    "OPENPID_DOCGEN_MDBOOK": "mdbook_command",
    "OPENPID_DOCGEN_IMAGE_EXT": "image_extension",
}


class DocgenConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    d2_command: str = "d2"
    mdbook_command: str = "mdbook"
    image_extension: str = DEFAULT_IMAGE_EXTENSION
    diagram_budget: int = Field(default=DEFAULT_DIAGRAM_BUDGET, gt=0)
    build_site: bool = True
    authors: list[str] = ["OpenPID DocGen"]
    language: str = "English"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> DocgenConfig:
        """Defaults, then ``OPENPID_DOCGEN_*`` variables, then *overrides*.

        Overrides whose value is None are ignored so CLI flags that were not
        given fall through.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for var, field in ENV_OVERRIDES.items():
            if env.get(var):
                LOGGER.debug("%s set from %s", field, var)
                values[field] = env[var]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
