import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from wpposture.core.versions import compare_versions
from wpposture.models.schemas import VulnEntry

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
VULNERABILITIES_FILE = DATA_DIR / "vulnerabilities.json"
PLUGIN_CATALOG_FILE = DATA_DIR / "plugins.json"

CORE_KINDS = ("wordpress", "core")
PLUGIN_KIND = "plugin"


class VersionRange(BaseModel):
    """Either an exact version or an exclusive upper bound."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["exact", "lt"]
    bound: str

    @classmethod
    def parse(cls, expr: str) -> "VersionRange":
        expr = expr.strip()
        if expr.startswith("<"):
            return cls(kind="lt", bound=expr[1:].strip())
        return cls(kind="exact", bound=expr)

    def matches(self, version: str) -> bool:
        if self.kind == "lt":
            return compare_versions(version, self.bound) < 0
        return version == self.bound


Bucket = Tuple[Tuple[VersionRange, Tuple[VulnEntry, ...]], ...]


def _bucket(ranges: Mapping[str, list]) -> Bucket:
    return tuple(
        (VersionRange.parse(expr), tuple(VulnEntry(**v) for v in entries))
        for expr, entries in ranges.items()
    )


class VulnerabilityIndex:
    """
    Static known-issues lookup.

    Core entries are exact-version buckets; plugin entries map a slug to
    range expressions. All ranges that match contribute, in table order.
    """

    def __init__(self, core: Mapping[str, list], plugins: Mapping[str, Mapping[str, list]]):
        self._core: Bucket = _bucket(core)
        self._plugins: Mapping[str, Bucket] = MappingProxyType(
            {slug: _bucket(ranges) for slug, ranges in plugins.items()}
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "VulnerabilityIndex":
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        index = cls(data.get("wordpress", {}), data.get("plugins", {}))
        log.debug("loaded vulnerability table from %s (%d plugins)", path, len(index._plugins))
        return index

    def lookup(self, kind: str, slug: Optional[str], version: Optional[str]) -> List[VulnEntry]:
        if not version:
            return []
        if kind in CORE_KINDS:
            bucket = self._core
        elif kind == PLUGIN_KIND:
            bucket = self._plugins.get(slug or "", ())
        else:
            return []

        found: List[VulnEntry] = []
        for rng, entries in bucket:
            if rng.matches(version):
                found.extend(entries)
        return found


@lru_cache(maxsize=None)
def default_index() -> VulnerabilityIndex:
    return VulnerabilityIndex.from_file(VULNERABILITIES_FILE)


def load_plugin_catalog(path: Union[str, Path] = PLUGIN_CATALOG_FILE) -> Tuple[str, ...]:
    with open(path, encoding="utf-8") as fh:
        return tuple(json.load(fh))


@lru_cache(maxsize=None)
def default_plugin_catalog() -> Tuple[str, ...]:
    return load_plugin_catalog()
