"""Library configuration via dataclass, resolved from arguments and environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from gravgen.types import DEFAULT_BASE_URL, DEFAULT_SIZE, AvatarStyle

logger = logging.getLogger(__name__)


@dataclass
class GravgenConfig:
    """Configuration shared by avatar requests and the CLI.

    Priority (highest wins): constructor arg > env var > default.

    ``default_style`` and ``default_size`` are kept as given so that a bad
    ``GRAVGEN_STYLE`` or ``GRAVGEN_SIZE`` is reported by request validation,
    with the same errors as a bad explicit argument.
    """

    base_url: str | None = None
    default_style: str | None = None
    default_size: int | str | None = None
    log_level: str | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("GRAVGEN_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = self.base_url.rstrip("/")

        if self.default_style is None:
            self.default_style = os.getenv("GRAVGEN_STYLE", AvatarStyle.default().value)

        if self.default_size is None:
            self.default_size = os.getenv("GRAVGEN_SIZE", DEFAULT_SIZE)

        if self.log_level is None:
            self.log_level = os.getenv("GRAVGEN_LOG_LEVEL", "WARNING")
        self.log_level = self.log_level.upper()

        if self.base_url != DEFAULT_BASE_URL:
            logger.debug("Using avatar service at %s", self.base_url)
