"""Core types and constants for gravgen."""

from __future__ import annotations

from enum import Enum


DEFAULT_BASE_URL = "https://www.gravatar.com/avatar"

# Square image bounds accepted by the avatar service, in pixels
MIN_SIZE = 1
MAX_SIZE = 512
DEFAULT_SIZE = 80

# Destination meaning "raw bytes on standard output"
STDOUT_SENTINEL = "-"

# MD5 of the empty identity
EMPTY_HASH = "d41d8cd98f00b204e9800998ecf8427e"

# MD5 of the service's "mystery person" placeholder image
MYSTERY_IMAGE_DIGEST = "d5fe5cbcc31cff5f8ac010db72eb000c"


class AvatarStyle(str, Enum):
    """Generated-image styles the avatar service falls back to.

    Using ``str, Enum`` so that ``AvatarStyle.IDENTICON == "identicon"`` is True.
    Declaration order matters: the first member is the default style.
    """

    IDENTICON = "identicon"
    MONSTERID = "monsterid"
    WAVATAR = "wavatar"
    RETRO = "retro"

    @classmethod
    def default(cls) -> AvatarStyle:
        return next(iter(cls))

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
