import pytest
from fastapi.testclient import TestClient

from wpposture import main
from wpposture.core.errors import TechStackError, WordPressScanError
from wpposture.models.schemas import (
    CoreVersion,
    DetectionResult,
    Indicators,
    SecurityReport,
    SkippedScan,
    TechStack,
)


@pytest.fixture
def api():
    return TestClient(main.app)


def test_health(api):
    assert api.get("/health").json() == {"status": "ok"}


def test_wordpress_report_uses_wire_names(api, monkeypatch):
    report = SecurityReport(
        detection=DetectionResult(indicators=Indicators(wp_content=True, wp_includes=True),
                                  is_wordpress=True, confidence=50),
        version=CoreVersion(detected="6.4.2", source="wp-emoji"),
        security_score=100,
    )
    seen = []

    async def fake_scan(url):
        seen.append(url)
        return report

    monkeypatch.setattr(main, "run_wordpress_scan", fake_scan)
    resp = api.post("/wordpress-security", json={"url": "https://blog.example.com"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["isWordPress"] is True
    assert body["securityScore"] == 100
    assert body["version"] == {"detected": "6.4.2", "source": "wp-emoji", "vulnerabilities": []}
    assert body["detection"]["indicators"]["wpIncludes"] is True
    assert body["theme"] is None
    assert seen[0].startswith("https://blog.example.com")


def test_skipped_scan(api, monkeypatch):
    async def fake_scan(url):
        return SkippedScan(skipped="Site does not appear to be running WordPress")

    monkeypatch.setattr(main, "run_wordpress_scan", fake_scan)
    resp = api.post("/wordpress-security", json={"url": "https://shop.example.com"})

    assert resp.status_code == 200
    assert resp.json() == {"isWordPress": False, "skipped": "Site does not appear to be running WordPress"}


def test_scan_failure_is_bad_gateway(api, monkeypatch):
    async def fake_scan(url):
        raise WordPressScanError("connection refused")

    monkeypatch.setattr(main, "run_wordpress_scan", fake_scan)
    resp = api.post("/wordpress-security", json={"url": "https://down.example.com"})

    assert resp.status_code == 502
    assert resp.json()["detail"] == "WordPress security scan failed: connection refused"


def test_invalid_url_rejected(api):
    assert api.post("/wordpress-security", json={"url": "not a url"}).status_code == 422


def test_tech_stack(api, monkeypatch):
    async def fake_detect(url):
        return TechStack(technologies=["Nginx", "WordPress"])

    monkeypatch.setattr(main, "detect_tech_stack", fake_detect)
    resp = api.post("/tech-stack", json={"url": "https://blog.example.com"})
    assert resp.json() == {"technologies": ["Nginx", "WordPress"]}


def test_tech_stack_failure(api, monkeypatch):
    async def fake_detect(url):
        raise TechStackError("Unable to find any technologies for site")

    monkeypatch.setattr(main, "detect_tech_stack", fake_detect)
    resp = api.post("/tech-stack", json={"url": "https://blog.example.com"})
    assert resp.status_code == 502
