import asyncio
import logging
from typing import Optional, Union

import httpx

from wpposture.checks.base import ScanContext
from wpposture.checks.directory_listing import DirectoryListingCheck
from wpposture.checks.plugins import PluginInventoryCheck
from wpposture.checks.rest_api import RestApiCheck
from wpposture.checks.sensitive_files import SensitiveFilesCheck
from wpposture.checks.theme import ThemeCheck
from wpposture.checks.users import UserEnumerationCheck
from wpposture.checks.xmlrpc import XmlRpcCheck
from wpposture.core.config import ScanOptions, Settings
from wpposture.core.detector import detect_wordpress
from wpposture.core.errors import WordPressScanError
from wpposture.core.fingerprint import extract_plugin_slugs, extract_theme, extract_version
from wpposture.core.http import client_for
from wpposture.core.recommendations import build_recommendations
from wpposture.core.scoring import score_report
from wpposture.core.vulndb import VulnerabilityIndex, default_index
from wpposture.models.schemas import CoreVersion, SecurityReport, SkippedScan

log = logging.getLogger(__name__)

NOT_WORDPRESS = "Site does not appear to be running WordPress"


def normalize_target(url: str) -> str:
    url = url.strip()
    return url[:-1] if url.endswith("/") else url


async def run_wordpress_scan(
    url: str,
    settings: Optional[Settings] = None,
    options: Optional[ScanOptions] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    index: Optional[VulnerabilityIndex] = None,
) -> Union[SecurityReport, SkippedScan]:
    """
    Fetch the landing page once, decide whether it is WordPress, then run
    every probe concurrently and fold the results into one scored report.

    Only the landing page fetch is fatal; probes fall back to their defaults.
    """
    base_url = normalize_target(url)
    settings = settings or Settings.from_env()
    options = options or ScanOptions()
    index = index or default_index()
    log.info("wordpress scan started for %s", base_url)

    async with client_for(settings, transport) as client:
        try:
            resp = await client.get(base_url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise WordPressScanError(str(e) or repr(e)) from e
        html = resp.text or ""

        detection = detect_wordpress(html)
        if not detection.is_wordpress:
            log.info("%s is not WordPress (confidence %d), skipping probes", base_url, detection.confidence)
            return SkippedScan(skipped=NOT_WORDPRESS)

        version_info = extract_version(html)
        ctx = ScanContext(
            base_url=base_url,
            theme_slug=extract_theme(html),
            plugin_slugs=extract_plugin_slugs(html),
            settings=settings,
            options=options,
        )
        probes = [
            SensitiveFilesCheck(),
            XmlRpcCheck(),
            UserEnumerationCheck(),
            DirectoryListingCheck(),
            RestApiCheck(),
            PluginInventoryCheck(index=index),
            ThemeCheck(),
        ]
        (exposed_files, xml_rpc, users, listing, rest_api, plugins, theme) = await asyncio.gather(
            *[p.settle(client, ctx) for p in probes]
        )

    report = SecurityReport(
        detection=detection,
        version=CoreVersion(
            detected=version_info.version,
            source=version_info.source,
            vulnerabilities=index.lookup("wordpress", None, version_info.version),
        ),
        theme=theme,
        plugins=plugins,
        exposed_files=exposed_files,
        xml_rpc=xml_rpc,
        user_enumeration=users,
        directory_listing=listing,
        rest_api=rest_api,
    )
    score = score_report(report)
    report = report.model_copy(update={
        "security_score": score.score,
        "score_deductions": score.deductions,
        "recommendations": build_recommendations(report),
    })
    log.info("wordpress scan finished for %s: score %d", base_url, score.score)
    return report
