from typing import List, NamedTuple

from wpposture.models.schemas import SecurityReport


class Score(NamedTuple):
    score: int
    deductions: List[str]


def score_report(report: SecurityReport) -> Score:
    """
    Start at 100 and subtract one capped penalty per triggered condition.
    Reasons are listed in evaluation order; the total never drops below 0.
    """
    score = 100
    deductions: List[str] = []

    if report.version.vulnerabilities:
        score -= 20
        deductions.append("Outdated WordPress with known vulnerabilities")

    critical_files = [f for f in report.exposed_files if f.critical]
    if critical_files:
        score -= min(25, len(critical_files) * 10)
        deductions.append("Critical files exposed")

    if report.xml_rpc.enabled:
        score -= 10
        if report.xml_rpc.pingback_enabled:
            score -= 5
        deductions.append("XML-RPC enabled")
        if report.xml_rpc.pingback_enabled:
            deductions.append("XML-RPC pingback enabled")

    if report.user_enumeration.rest_api_exposed:
        score -= 10
        deductions.append("User data exposed via REST API")

    if report.user_enumeration.author_archives_enabled:
        score -= 5
        deductions.append("Author archives enabled")

    if report.directory_listing:
        score -= min(10, len(report.directory_listing) * 3)
        deductions.append("Directory listing enabled")

    vulnerable_plugins = [p for p in report.plugins if p.vulnerabilities]
    if vulnerable_plugins:
        score -= min(20, len(vulnerable_plugins) * 5)
        deductions.append("Plugins with known vulnerabilities")

    return Score(max(0, score), deductions)
