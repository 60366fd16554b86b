"""gravgen -- fetch or generate Gravatar avatars.

Top-level convenience re-exports::

    from gravgen import AvatarRequest, content_hash
    from gravgen.errors import ValidationError  # exception hierarchy
"""

__version__ = "0.1.0"

from gravgen.avatar import AvatarRequest, content_hash, normalize_identity
from gravgen.config import GravgenConfig
from gravgen.errors import (
    ConfigurationError,
    DestinationExistsError,
    FetchError,
    GravgenError,
    PersistenceError,
    ValidationError,
)
from gravgen.identity import FixedIdentitySource, IdentitySource, UuidgenIdentitySource
from gravgen.types import AvatarStyle

__all__ = [
    "__version__",
    "AvatarRequest",
    "AvatarStyle",
    "ConfigurationError",
    "DestinationExistsError",
    "FetchError",
    "FixedIdentitySource",
    "GravgenConfig",
    "GravgenError",
    "IdentitySource",
    "PersistenceError",
    "UuidgenIdentitySource",
    "ValidationError",
    "content_hash",
    "normalize_identity",
]
