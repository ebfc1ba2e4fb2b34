import asyncio
import logging
from typing import List

from wpposture.checks.base import Probe, ScanContext

log = logging.getLogger(__name__)

LISTING_DIRECTORIES: List[str] = [
    "/wp-content/uploads/",
    "/wp-content/plugins/",
    "/wp-content/themes/",
    "/wp-includes/",
]

# case-sensitive, as emitted by Apache/nginx autoindex
LISTING_MARKER = "Index of"


class DirectoryListingCheck(Probe):
    key = "directory_listing"
    title = "Directory Listing"

    def default(self) -> List[str]:
        return []

    async def _is_listed(self, client, ctx: ScanContext, path: str) -> bool:
        try:
            r = await client.get(ctx.url(path), timeout=ctx.settings.probe_timeout)
            return r.status_code == 200 and LISTING_MARKER in (r.text or "")
        except Exception as e:
            log.debug("GET %s failed: %r", path, e)
            return False

    async def run(self, client, ctx: ScanContext) -> List[str]:
        listed = await asyncio.gather(*[self._is_listed(client, ctx, d) for d in LISTING_DIRECTORIES])
        return [d for d, hit in zip(LISTING_DIRECTORIES, listed) if hit]
