"""Shared plumbing for the WordPress probes."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from wpposture.core.config import ScanOptions, Settings

log = logging.getLogger(__name__)


class ScanContext(BaseModel):
    """Facts every probe may read. Built once from the landing page."""
    model_config = ConfigDict(frozen=True)

    base_url: str
    theme_slug: Optional[str] = None
    plugin_slugs: List[str] = Field(default_factory=list)
    settings: Settings = Field(default_factory=Settings)
    options: ScanOptions = Field(default_factory=ScanOptions)

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"


class Probe(ABC):
    key: str = ""
    title: str = ""

    @abstractmethod
    async def run(self, client: httpx.AsyncClient, ctx: ScanContext) -> Any:
        """Perform the probe. May raise; `settle` converts failures."""

    @abstractmethod
    def default(self) -> Any:
        """Result reported when the probe cannot complete."""

    async def settle(self, client: httpx.AsyncClient, ctx: ScanContext) -> Any:
        try:
            return await self.run(client, ctx)
        except Exception as e:
            log.debug("probe %s degraded to default: %r", self.key, e)
            return self.default()
