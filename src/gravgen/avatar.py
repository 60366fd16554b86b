"""Avatar requests against a Gravatar-compatible HTTP service.

An :class:`AvatarRequest` is validated and hashed at construction time,
fetched with a single blocking GET, and optionally written to a file or to
standard output.  The same identity always maps to the same content hash,
so the service always returns the same image for it::

    req = AvatarRequest("foo@example.com", style="retro", size=128)
    req.fetch()
    req.write("foo.png")
"""

from __future__ import annotations

import hashlib
import logging
import sys
from os import PathLike
from pathlib import Path

import httpx

from gravgen.config import GravgenConfig
from gravgen.errors import (
    DestinationExistsError,
    FetchError,
    InvalidSizeError,
    InvalidSizeTypeError,
    InvalidStyleError,
    PersistenceError,
)
from gravgen.identity import IdentitySource, UuidgenIdentitySource
from gravgen.types import MAX_SIZE, MIN_SIZE, STDOUT_SENTINEL, AvatarStyle

logger = logging.getLogger(__name__)


def normalize_identity(identity: str) -> str:
    """Trim surrounding whitespace and lower-case *identity*."""
    return identity.strip().lower()


def content_hash(identity: str) -> str:
    """Return the 32-char lowercase MD5 hex digest of the normalized *identity*.

    This is the lookup key used across the Gravatar ecosystem.
    """
    normalized = normalize_identity(identity).encode("utf-8")
    return hashlib.md5(normalized, usedforsecurity=False).hexdigest()


def _validate_style(style: str | AvatarStyle) -> AvatarStyle:
    if isinstance(style, AvatarStyle):
        return style
    if not isinstance(style, str):
        raise InvalidStyleError(f"invalid style: {style!r}")
    try:
        return AvatarStyle(style)
    except ValueError:
        raise InvalidStyleError(
            f"invalid style: {style!r}. Must be one of: {AvatarStyle.values()}"
        ) from None


def _validate_size(size: int | str) -> int:
    # bool is an int subclass but never a meaningful pixel size
    if isinstance(size, bool) or not isinstance(size, (int, str)):
        raise InvalidSizeTypeError(f"invalid size: {size!r} is not an integer")
    if isinstance(size, str):
        try:
            size = int(size.strip(), 10)
        except ValueError:
            raise InvalidSizeTypeError(f"invalid size: {size!r} is not an integer") from None
    if size < MIN_SIZE or size > MAX_SIZE:
        raise InvalidSizeError(
            f"invalid size: {size}. Must be between {MIN_SIZE} and {MAX_SIZE}"
        )
    return size


class AvatarRequest:
    """A validated request for one avatar image.

    Args:
        identity: Email address or token to derive the avatar from.  When
            omitted, one is taken from *identity_source* (``uuidgen`` by
            default).
        style: One of :class:`AvatarStyle`; defaults to the configured
            default style (``identicon``).
        size: Square edge in pixels, an int or a base-10 integer string;
            defaults to the configured default size (80).
        identity_source: Generator consulted once when *identity* is omitted.
        config: Service and default settings; read from the environment
            when omitted.

    Raises:
        ValidationError: On a bad style or size.
        ConfigurationError: When no identity was given and the identity
            source cannot produce one.
    """

    def __init__(
        self,
        identity: str | None = None,
        style: str | AvatarStyle | None = None,
        size: int | str | None = None,
        *,
        identity_source: IdentitySource | None = None,
        config: GravgenConfig | None = None,
    ) -> None:
        self._config = config or GravgenConfig()
        self._style = _validate_style(self._config.default_style if style is None else style)
        self._size = _validate_size(self._config.default_size if size is None else size)

        if identity is None:
            source = identity_source or UuidgenIdentitySource()
            identity = source.generate().strip()
        self._identity = identity
        self._content_hash = content_hash(identity)
        self._image: bytes | None = None

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def content_hash(self) -> str:
        return self._content_hash

    @property
    def style(self) -> AvatarStyle:
        return self._style

    @property
    def size(self) -> int:
        return self._size

    @property
    def image(self) -> bytes | None:
        """Image bytes from the last successful :meth:`fetch`, else None."""
        return self._image

    @property
    def url(self) -> str:
        return f"{self._config.base_url}/{self._content_hash}?d={self._style.value}&s={self._size}"

    def with_style(self, style: str | AvatarStyle) -> AvatarRequest:
        """Return a new request for the same identity in another style."""
        return AvatarRequest(self._identity, style, self._size, config=self._config)

    def with_size(self, size: int | str) -> AvatarRequest:
        """Return a new request for the same identity at another size."""
        return AvatarRequest(self._identity, self._style, size, config=self._config)

    def describe(self) -> str:
        """Human-readable summary, safe to print before any image bytes."""
        return "\n".join([
            f"Identity: {self._identity}",
            f"Hash:     {self._content_hash}",
            f"Style:    {self._style.value}",
            f"Size:     {self._size}",
        ])

    def __repr__(self) -> str:
        return (
            f"AvatarRequest(identity={self._identity!r}, "
            f"content_hash={self._content_hash!r}, "
            f"style={self._style.value!r}, size={self._size})"
        )

    # ------------------------------------------------------------------
    # Network
    # ------------------------------------------------------------------

    def fetch(self) -> bytes:
        """Download the avatar with a single GET and store it on the request.

        Every call hits the network; nothing is cached.

        Raises:
            FetchError: On any transport error or non-2xx response.  The
                previously stored image, if any, is left untouched.
        """
        url = self.url
        logger.debug("Fetching avatar %s", url)
        try:
            resp = httpx.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.debug("Avatar service returned HTTP %s for %s", status, url)
            raise FetchError(
                f"avatar service returned HTTP {status} for {url}",
                url=url,
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            logger.debug("Avatar fetch failed for %s: %s", url, exc)
            raise FetchError(f"failed to fetch {url}: {exc}", url=url) from exc

        self._image = resp.content
        logger.debug("Fetched %d bytes for %s", len(self._image), self._content_hash)
        return self._image

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def auto_filename(self, token: str | int) -> str:
        """File name encoding a uniqueness *token* and the identity.

        The identity can be recovered from the name to recreate the same
        avatar later, e.g. at another size.
        """
        return f"avatar_{token}_{self._identity}.png"

    def write(self, destination: str | PathLike[str], *, overwrite: bool = True) -> None:
        """Write the fetched image to *destination*.

        ``"-"`` writes the raw bytes to standard output and nothing else.
        Any other value is a file path, truncated if it exists unless
        *overwrite* is false, in which case :class:`DestinationExistsError`
        is raised before the file is touched.
        """
        if self._image is None:
            raise PersistenceError("no image to write; call fetch() first")

        if isinstance(destination, str) and destination == STDOUT_SENTINEL:
            try:
                stream = sys.stdout.buffer
                stream.write(self._image)
                stream.flush()
            except OSError as exc:
                raise PersistenceError(f"cannot write to stdout: {exc}") from exc
            return

        path = Path(destination)
        # "xb" refuses an existing file in the same call that creates it
        mode = "wb" if overwrite else "xb"
        try:
            with open(path, mode) as f:
                f.write(self._image)
        except FileExistsError:
            raise DestinationExistsError(str(destination)) from None
        except OSError as exc:
            raise PersistenceError(f"cannot write {destination}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(self._image), path)
