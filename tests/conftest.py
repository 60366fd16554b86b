"""Shared test fixtures for gravgen tests.

The avatar service is replaced by a fake that answers every GET with
bytes derived from the request, so digests of fetched images are stable.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import httpx
import pytest

from gravgen.config import GravgenConfig
from gravgen.identity import FixedIdentitySource

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"

KNOWN_UUID = "52854ebf-b9ce-44a1-aa97-aca08bb1820b"
KNOWN_UUID_HASH = "57b661516282b4020a78391b16dbec56"
FOO_EMAIL = "foo@example.com"
FOO_HASH = "b48def645758b95537d4424c84d1a9ff"


def fake_image(style: str, digest: str, size: str | int) -> bytes:
    """Bytes the fake service returns for a given request."""
    return PNG_MAGIC + f"{style}:{digest}:{size}".encode("ascii")


class FakeAvatarService:
    """Stand-in for ``httpx.get`` recording each requested URL."""

    def __init__(self) -> None:
        self.urls: list[str] = []
        self.status_code = 200

    def __call__(self, url: str, **kwargs) -> httpx.Response:
        self.urls.append(url)
        parsed = httpx.URL(url)
        digest = parsed.path.rsplit("/", 1)[-1]
        body = fake_image(parsed.params["d"], digest, parsed.params["s"])
        return httpx.Response(
            self.status_code,
            content=body,
            request=httpx.Request("GET", url),
        )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep GRAVGEN_* variables from the developer's shell out of tests."""
    for var in list(os.environ):
        if var.startswith("GRAVGEN_"):
            monkeypatch.delenv(var)


@pytest.fixture()
def fake_service():
    """Patch the HTTP client with a :class:`FakeAvatarService`."""
    service = FakeAvatarService()
    with patch("gravgen.avatar.httpx.get", side_effect=service) as mock_get:
        service.mock = mock_get
        yield service


@pytest.fixture()
def config() -> GravgenConfig:
    return GravgenConfig(base_url="https://avatars.test/avatar")


@pytest.fixture()
def uuid_source() -> FixedIdentitySource:
    return FixedIdentitySource(KNOWN_UUID)
