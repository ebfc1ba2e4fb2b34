import httpx
from contextlib import asynccontextmanager
from typing import Optional

from wpposture.core.config import Settings


@asynccontextmanager
async def client_for(settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
    settings = settings or Settings.from_env()
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout, connect=min(5.0, settings.timeout)),
        headers={"User-Agent": settings.user_agent, "Accept": "*/*"},
        follow_redirects=True,
        max_redirects=settings.max_redirects,
        http2=True,
        verify=True,
        transport=transport,
    ) as client:
        yield client
