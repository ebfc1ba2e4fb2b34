import re

from wpposture.checks.base import Probe, ScanContext
from wpposture.models.schemas import XmlRpcStatus

LIST_METHODS_CALL = (
    '<?xml version="1.0"?>'
    "<methodCall><methodName>system.listMethods</methodName></methodCall>"
)
METHOD_RE = re.compile(r"<string>([^<]+)</string>")
MAX_METHODS = 20


class XmlRpcCheck(Probe):
    key = "xmlrpc"
    title = "XML-RPC Interface"

    def default(self) -> XmlRpcStatus:
        return XmlRpcStatus()

    async def run(self, client, ctx: ScanContext) -> XmlRpcStatus:
        r = await client.post(
            ctx.url("/xmlrpc.php"),
            content=LIST_METHODS_CALL,
            headers={"Content-Type": "text/xml"},
        )
        body = r.text or ""
        if r.status_code != 200 or "methodResponse" not in body:
            return self.default()

        methods = METHOD_RE.findall(body)
        return XmlRpcStatus(
            enabled=True,
            methods=methods[:MAX_METHODS],
            pingback_enabled="pingback.ping" in methods,
            total_methods=len(methods),
        )
