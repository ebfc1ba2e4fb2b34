from wpposture.checks.base import Probe, ScanContext
from wpposture.models.schemas import RestApiStatus

MAX_NAMESPACES = 15


class RestApiCheck(Probe):
    key = "rest_api"
    title = "REST API Exposure"

    def default(self) -> RestApiStatus:
        return RestApiStatus()

    async def run(self, client, ctx: ScanContext) -> RestApiStatus:
        r = await client.get(ctx.url("/wp-json/"))
        if r.status_code != 200:
            return self.default()
        data = r.json()
        if not isinstance(data, dict) or not isinstance(data.get("namespaces"), list):
            return self.default()

        name = data.get("name")
        description = data.get("description")
        return RestApiStatus(
            exposed=True,
            namespaces=[str(ns) for ns in data["namespaces"][:MAX_NAMESPACES]],
            name=name if isinstance(name, str) else None,
            description=description if isinstance(description, str) else None,
        )
