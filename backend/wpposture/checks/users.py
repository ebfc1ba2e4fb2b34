import asyncio
import logging
from typing import List, Tuple

from wpposture.checks.base import Probe, ScanContext
from wpposture.models.schemas import UserEnumerationResult, WpUser

log = logging.getLogger(__name__)

MAX_USERS = 10


def _user(entry: dict) -> WpUser:
    # mistyped fields become None instead of failing the whole list
    uid = entry.get("id")
    name = entry.get("name")
    slug = entry.get("slug")
    return WpUser(
        id=uid if isinstance(uid, int) and not isinstance(uid, bool) else None,
        name=name if isinstance(name, str) else None,
        slug=slug if isinstance(slug, str) else None,
    )


class UserEnumerationCheck(Probe):
    """
    Two independent signals:
      * /wp-json/wp/v2/users answers with a user array;
      * /?author=1 redirects to an /author/<slug>/ archive.
    """
    key = "user_enumeration"
    title = "User Enumeration"

    def default(self) -> UserEnumerationResult:
        return UserEnumerationResult()

    async def _rest_users(self, client, ctx: ScanContext) -> Tuple[bool, List[WpUser]]:
        try:
            r = await client.get(ctx.url("/wp-json/wp/v2/users"))
            if r.status_code != 200:
                return False, []
            data = r.json()
        except Exception as e:
            log.debug("user REST endpoint check failed: %r", e)
            return False, []
        if not isinstance(data, list):
            return False, []
        return True, [_user(u) for u in data[:MAX_USERS] if isinstance(u, dict)]

    async def _author_redirect(self, client, ctx: ScanContext) -> bool:
        try:
            r = await client.get(ctx.url("/?author=1"), follow_redirects=False)
            if r.status_code in (301, 302):
                return "/author/" in r.headers.get("location", "")
            return False
        except Exception as e:
            log.debug("author archive check failed: %r", e)
            return False

    async def run(self, client, ctx: ScanContext) -> UserEnumerationResult:
        (exposed, users), archives = await asyncio.gather(
            self._rest_users(client, ctx),
            self._author_redirect(client, ctx),
        )
        return UserEnumerationResult(
            rest_api_exposed=exposed,
            author_archives_enabled=archives,
            users_found=users,
        )
