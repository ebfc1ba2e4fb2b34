import re
from typing import List, Optional

from wpposture.models.schemas import VersionInfo

# Ordered by priority; first match wins.
VERSION_PATTERNS = [
    ("generator-meta", re.compile(
        r"""<meta[^>]*name=["']generator["'][^>]*content=["']WordPress\s*([\d.]+)["']""", re.I)),
    ("wp-emoji", re.compile(r"wp-emoji-release\.min\.js\?ver=([\d.]+)")),
    ("asset-version", re.compile(r"\?ver=([\d.]+)")),
]

THEME_RE = re.compile(r"""/wp-content/themes/([^/'"]+)""")
PLUGIN_RE = re.compile(r"""/wp-content/plugins/([^/'"]+)""")


def extract_version(html: str) -> VersionInfo:
    for source, pattern in VERSION_PATTERNS:
        m = pattern.search(html or "")
        if m:
            return VersionInfo(version=m.group(1), source=source)
    return VersionInfo(version=None, source="unknown")


def extract_theme(html: str) -> Optional[str]:
    m = THEME_RE.search(html or "")
    return m.group(1) if m else None


def extract_plugin_slugs(html: str) -> List[str]:
    """Distinct plugin slugs referenced in markup, in order of first appearance."""
    return list(dict.fromkeys(PLUGIN_RE.findall(html or "")))
