import asyncio
import logging
from typing import List, Tuple

from wpposture.checks.base import Probe, ScanContext
from wpposture.models.schemas import ExposedFile

log = logging.getLogger(__name__)

# (path, display name, critical). Criticality is a property of the path,
# not of what the server answers.
SENSITIVE_FILES: List[Tuple[str, str, bool]] = [
    # config and its editor/backup leftovers
    ("/wp-config.php", "wp-config.php", True),
    ("/wp-config.php.bak", "wp-config.php.bak", True),
    ("/wp-config.php~", "wp-config.php~", True),
    ("/wp-config.php.old", "wp-config.php.old", True),
    ("/wp-config.php.save", "wp-config.php.save", True),
    # server config / logs
    ("/.htaccess", ".htaccess", False),
    ("/wp-content/debug.log", "debug.log", True),
    ("/error_log", "error_log", False),
    # version disclosure
    ("/readme.html", "readme.html", False),
    ("/license.txt", "license.txt", False),
    ("/wp-config-sample.php", "wp-config-sample.php", False),
]


class SensitiveFilesCheck(Probe):
    key = "sensitive_files"
    title = "Sensitive Files"

    def default(self) -> List[ExposedFile]:
        return []

    async def _head(self, client, ctx: ScanContext, path: str, name: str, critical: bool) -> ExposedFile:
        try:
            r = await client.head(ctx.url(path), timeout=ctx.settings.probe_timeout)
            return ExposedFile(path=path, name=name, critical=critical,
                               exposed=r.status_code == 200, status_code=r.status_code)
        except Exception as e:
            log.debug("HEAD %s failed: %r", path, e)
            return ExposedFile(path=path, name=name, critical=critical, exposed=False, status_code=0)

    async def run(self, client, ctx: ScanContext) -> List[ExposedFile]:
        files = await asyncio.gather(*[self._head(client, ctx, *f) for f in SENSITIVE_FILES])
        return [f for f in files if f.exposed]
