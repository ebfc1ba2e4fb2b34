import asyncio
import logging
import re
from typing import List, Optional, Sequence, Tuple

from wpposture.checks.base import Probe, ScanContext
from wpposture.core.vulndb import VulnerabilityIndex, default_index, default_plugin_catalog
from wpposture.models.schemas import PluginRecord

log = logging.getLogger(__name__)

NAME_RE = re.compile(r"===\s*(.+?)\s*===")
STABLE_TAG_RE = re.compile(r"Stable tag:\s*([\d.]+)", re.I)


def candidate_slugs(markup_slugs: Sequence[str], catalog: Sequence[str], limit: int) -> List[str]:
    """Markup slugs first, then the catalog; deduplicated and capped."""
    return list(dict.fromkeys([*markup_slugs, *catalog]))[:limit]


def parse_readme(slug: str, text: str) -> Tuple[str, Optional[str]]:
    name = NAME_RE.search(text)
    version = STABLE_TAG_RE.search(text)
    return (name.group(1) if name else slug), (version.group(1) if version else None)


class PluginInventoryCheck(Probe):
    """
    Confirms plugins by fetching wp-content/plugins/<slug>/readme.txt.

    Candidates are probed in sequential batches; requests inside a batch run
    concurrently, so at most `plugin_batch_size` are in flight. Slugs seen in
    markup but not confirmed by a readme are appended afterwards with no version.
    """
    key = "plugins"
    title = "Plugin Inventory"

    def __init__(self, index: Optional[VulnerabilityIndex] = None, catalog: Optional[Sequence[str]] = None):
        self.index = index
        self.catalog = catalog

    def default(self) -> List[PluginRecord]:
        return []

    async def _probe(self, client, ctx: ScanContext, slug: str) -> Optional[PluginRecord]:
        try:
            r = await client.get(ctx.url(f"/wp-content/plugins/{slug}/readme.txt"),
                                 timeout=ctx.settings.probe_timeout)
        except Exception as e:
            log.debug("readme probe for %s failed: %r", slug, e)
            return None
        if r.status_code != 200:
            return None
        name, version = parse_readme(slug, r.text or "")
        index = self.index or default_index()
        return PluginRecord(
            slug=slug,
            name=name,
            version=version,
            vulnerabilities=index.lookup("plugin", slug, version),
        )

    async def run(self, client, ctx: ScanContext) -> List[PluginRecord]:
        catalog = self.catalog if self.catalog is not None else default_plugin_catalog()
        candidates = candidate_slugs(ctx.plugin_slugs, catalog, ctx.options.max_plugin_candidates)
        size = max(1, ctx.options.plugin_batch_size)

        found: List[PluginRecord] = []
        for start in range(0, len(candidates), size):
            batch = candidates[start:start + size]
            results = await asyncio.gather(*[self._probe(client, ctx, slug) for slug in batch])
            found.extend(p for p in results if p is not None)

        seen = {p.slug for p in found}
        for slug in ctx.plugin_slugs:
            if slug not in seen:
                found.append(PluginRecord(slug=slug, name=slug, source="html"))
                seen.add(slug)

        log.debug("plugin inventory: %d candidates, %d reported", len(candidates), len(found))
        return found
