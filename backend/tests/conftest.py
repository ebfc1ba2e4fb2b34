from typing import Any, Dict, List

import httpx
import pytest

from wpposture.checks.base import ScanContext
from wpposture.core.config import Settings

BASE = "https://blog.example.com"

WP_HTML = """<!DOCTYPE html>
<html><head>
<meta name="generator" content="WordPress 5.9" />
<link rel="stylesheet" href="https://blog.example.com/wp-content/themes/astra/style.css?ver=5.9" />
<link rel="stylesheet" href="https://blog.example.com/wp-content/plugins/akismet/_inc/akismet.css?ver=5.3" />
<script src="https://blog.example.com/wp-includes/js/wp-emoji-release.min.js?ver=5.9"></script>
<link rel="https://api.w.org/" href="https://blog.example.com/wp-json/" />
</head><body>hello</body></html>
"""

PLAIN_HTML = "<html><head><title>Shop</title></head><body><a href='/wp-content/old.png'>x</a></body></html>"


class FakeSite:
    """
    Route table for httpx.MockTransport.

    Keys are "METHOD /path?query"; values are dicts of Response kwargs or an
    exception instance to raise. Unknown routes answer 404.
    """

    def __init__(self, routes: Dict[str, Any] = None):
        self.routes = dict(routes or {})
        self.calls: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        key = f"{request.method} {request.url.raw_path.decode()}"
        route = self.routes.get(key)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return httpx.Response(**route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def paths(self, method: str = None) -> List[str]:
        return [r.url.raw_path.decode() for r in self.calls if method is None or r.method == method]


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def make_ctx(settings):
    def _make(**kw) -> ScanContext:
        return ScanContext(base_url=BASE, settings=settings, **kw)
    return _make


@pytest.fixture
def site():
    return FakeSite()


@pytest.fixture
async def client(site):
    async with httpx.AsyncClient(transport=site.transport) as c:
        yield c
