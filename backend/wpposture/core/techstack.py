"""
Generic technology fingerprinting.

Independent of the WordPress scan. Any callable taking a PageSample and
returning technology names can be plugged in; the built-in one runs the
Wappalyzer rule set over the fetched page.
"""

import logging
from functools import lru_cache
from typing import Callable, Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field
from Wappalyzer import Wappalyzer, WebPage

from wpposture.core.config import Settings
from wpposture.core.errors import TechStackError
from wpposture.core.http import client_for
from wpposture.models.schemas import TechStack

log = logging.getLogger(__name__)


class PageSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    html: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    status_code: int = 0


Fingerprinter = Callable[[PageSample], List[str]]


@lru_cache(maxsize=1)
def _wappalyzer() -> Wappalyzer:
    # compiling the bundled rule set takes a while, do it once
    return Wappalyzer.latest()


def wappalyzer_fingerprinter(page: PageSample) -> List[str]:
    headers = {k.lower(): v for k, v in page.headers.items()}
    return sorted(_wappalyzer().analyze(WebPage(page.url, page.html, headers)))


async def detect_tech_stack(
    url: str,
    fingerprinter: Optional[Fingerprinter] = None,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> TechStack:
    fingerprinter = fingerprinter or wappalyzer_fingerprinter
    async with client_for(settings, transport) as client:
        try:
            r = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TechStackError(str(e) or repr(e)) from e

    page = PageSample(url=url, html=r.text or "", headers=dict(r.headers), status_code=r.status_code)
    technologies = fingerprinter(page)
    if not technologies:
        raise TechStackError("Unable to find any technologies for site")
    log.info("%s: %d technologies detected", url, len(technologies))
    return TechStack(technologies=technologies)
