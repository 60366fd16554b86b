"""Identity sources for avatar requests made without an explicit identity.

The real source shells out to ``uuidgen``; :class:`FixedIdentitySource`
returns predetermined values so that "random" avatars can be reproduced.
"""

from __future__ import annotations

import abc
import logging
import shutil
import subprocess
from collections.abc import Iterable, Iterator

from gravgen.errors import ConfigurationError

logger = logging.getLogger(__name__)


class IdentitySource(abc.ABC):
    """Abstract source of fresh identity strings.

    Two implementations:
    - ``UuidgenIdentitySource``: invokes the OS ``uuidgen`` utility
    - ``FixedIdentitySource``: returns predetermined values
    """

    @abc.abstractmethod
    def generate(self) -> str:
        """Return a new identity, stripped of surrounding whitespace."""


class UuidgenIdentitySource(IdentitySource):
    """Generate identities by invoking the OS ``uuidgen`` utility.

    The executable is looked up on ``PATH`` at construction time, so a
    missing utility is reported before any request is built.
    """

    def __init__(self, executable: str = "uuidgen") -> None:
        path = shutil.which(executable)
        if path is None:
            raise ConfigurationError(f"required external generator not found: {executable}")
        self._executable = executable
        self._path = path

    def generate(self) -> str:
        try:
            proc = subprocess.run(
                [self._path],
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ConfigurationError(f"{self._executable} failed: {exc}") from exc

        value = proc.stdout.strip()
        if not value:
            raise ConfigurationError(f"{self._executable} produced no output")
        logger.debug("Generated identity %s via %s", value, self._path)
        return value


class FixedIdentitySource(IdentitySource):
    """Deterministic identity source.

    Given a string, every call returns it. Given an iterable, successive
    calls return successive items until it is exhausted.
    """

    def __init__(self, values: str | Iterable[str]) -> None:
        self._values: Iterator[str] | None
        if isinstance(values, str):
            self._value: str | None = values
            self._values = None
        else:
            self._value = None
            self._values = iter(values)
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        if self._values is None:
            return self._value.strip()
        try:
            return next(self._values).strip()
        except StopIteration:
            raise ConfigurationError("fixed identity source exhausted") from None
