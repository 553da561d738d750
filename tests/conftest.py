"""
Shared fixtures for Porta Client tests.

HTTP traffic is stubbed with ``httpx.MockTransport``: each test passes a
handler that asserts on the outgoing request and returns a canned response.
"""

from pathlib import Path
from typing import Callable

import httpx
import pytest

from porta_client import AdminPortal, ThreeScaleClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CREDENTIAL = "someAccessToken"


@pytest.fixture
def admin_portal() -> AdminPortal:
    return AdminPortal("https", "www.example.com", 443)


@pytest.fixture
def make_client(admin_portal: AdminPortal) -> Callable[..., ThreeScaleClient]:
    """Build a client whose transport is the given request handler."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        credential: str = CREDENTIAL,
    ) -> ThreeScaleClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return ThreeScaleClient(admin_portal, credential, http_client=http_client)

    return _make


@pytest.fixture
def load_fixture() -> Callable[[str], bytes]:
    """Read a response body from tests/fixtures."""

    def _load(name: str) -> bytes:
        return (FIXTURES_DIR / name).read_bytes()

    return _load
