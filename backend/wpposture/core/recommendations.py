from typing import List

from wpposture.models.schemas import SEVERITY_RANK, Recommendation, SecurityReport


def _candidates(report: SecurityReport) -> List[Recommendation]:
    recs: List[Recommendation] = []

    if report.version.vulnerabilities:
        recs.append(Recommendation(
            severity="critical",
            title="Update WordPress Core",
            description=f"WordPress {report.version.detected} has known vulnerabilities. "
                        "Update to the latest version immediately.",
        ))

    critical_files = [f for f in report.exposed_files if f.critical]
    if critical_files:
        names = ", ".join(f.name for f in critical_files)
        recs.append(Recommendation(
            severity="critical",
            title="Protect Sensitive Files",
            description=f"Critical files are publicly accessible: {names}. "
                        "Configure server to block access.",
        ))

    if report.xml_rpc.enabled:
        recs.append(Recommendation(
            severity="high",
            title="Disable XML-RPC",
            description="XML-RPC is enabled and can be used for brute force attacks. "
                        "Disable it if not needed.",
        ))

    if report.user_enumeration.rest_api_exposed:
        recs.append(Recommendation(
            severity="high",
            title="Restrict User API",
            description="User information is exposed via REST API. "
                        "Restrict access to authenticated users only.",
        ))

    if report.directory_listing:
        recs.append(Recommendation(
            severity="medium",
            title="Disable Directory Listing",
            description=f"Directory listing is enabled for: {', '.join(report.directory_listing)}. "
                        'Add "Options -Indexes" to .htaccess.',
        ))

    for plugin in report.plugins:
        if not plugin.vulnerabilities:
            continue
        ids = ", ".join(v.id for v in plugin.vulnerabilities)
        recs.append(Recommendation(
            severity="critical",
            title=f"Update {plugin.name}",
            description=f'Plugin "{plugin.name}" v{plugin.version} has known vulnerabilities: {ids}',
        ))

    if any(f.name == "readme.html" for f in report.exposed_files):
        recs.append(Recommendation(
            severity="low",
            title="Remove readme.html",
            description="The readme.html file reveals WordPress version. Delete it from the server.",
        ))

    return recs


def prioritize(recs: List[Recommendation]) -> List[Recommendation]:
    """Order by severity rank; equal ranks keep generation order."""
    return sorted(recs, key=lambda r: SEVERITY_RANK[r.severity])


def build_recommendations(report: SecurityReport) -> List[Recommendation]:
    return prioritize(_candidates(report))
