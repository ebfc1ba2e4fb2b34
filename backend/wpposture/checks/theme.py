import logging
import re
from typing import Optional

from wpposture.checks.base import Probe, ScanContext
from wpposture.models.schemas import ThemeRecord

log = logging.getLogger(__name__)

VERSION_RE = re.compile(r"Version:\s*([\d.]+)", re.I)
NAME_RE = re.compile(r"Theme Name:\s*(.+)", re.I)


def parse_stylesheet(slug: str, css: str) -> ThemeRecord:
    version = VERSION_RE.search(css)
    name = NAME_RE.search(css)
    return ThemeRecord(
        slug=slug,
        name=name.group(1).strip() if name else slug,
        version=version.group(1) if version else None,
    )


class ThemeCheck(Probe):
    key = "theme"
    title = "Active Theme"

    def default(self) -> Optional[ThemeRecord]:
        return None

    async def run(self, client, ctx: ScanContext) -> Optional[ThemeRecord]:
        slug = ctx.theme_slug
        if not slug:
            return None
        try:
            r = await client.get(ctx.url(f"/wp-content/themes/{slug}/style.css"))
            if r.status_code == 200:
                return parse_stylesheet(slug, r.text or "")
        except Exception as e:
            log.debug("style.css for theme %s unavailable: %r", slug, e)
        # a missing stylesheet still means the theme exists
        return ThemeRecord(slug=slug, name=slug, version=None)
