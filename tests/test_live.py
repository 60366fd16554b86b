"""Golden checks against the real Gravatar service.

Skipped unless ``GRAVGEN_LIVE_TESTS=1``; the remote service may change its
generated artwork, so these are a regression signal rather than a gate.
"""

from __future__ import annotations

import hashlib
import os

import pytest

from gravgen.avatar import AvatarRequest
from gravgen.config import GravgenConfig
from gravgen.types import MYSTERY_IMAGE_DIGEST

from tests.conftest import FOO_EMAIL

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(
        os.environ.get("GRAVGEN_LIVE_TESTS") != "1",
        reason="set GRAVGEN_LIVE_TESTS=1 to hit the real avatar service",
    ),
]

GOLDEN = {
    "identicon": "5e0d21a154408b52620eb216b5ece80c",
    "monsterid": "dff46665c13c893df59961d7250d7be0",
    "wavatar": "812c451340234731b4a6b2514a3d96cd",
    "retro": "eebff180322f4538d4525da84ee4e92d",
}


def test_default_avatar_is_generated():
    req = AvatarRequest()
    assert hashlib.md5(req.fetch()).hexdigest() != MYSTERY_IMAGE_DIGEST


@pytest.mark.parametrize("style", sorted(GOLDEN))
def test_golden_images(style, tmp_path):
    target = tmp_path / f"{style}.png"
    req = AvatarRequest(FOO_EMAIL, style=style, config=GravgenConfig())
    req.fetch()
    req.write(target)
    assert hashlib.md5(target.read_bytes()).hexdigest() == GOLDEN[style]
