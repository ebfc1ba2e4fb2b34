import pytest

from wpposture.core.config import DEFAULT_UA, ScanOptions, Settings
from wpposture.core.http import client_for

ENV = ("WPPOSTURE_TIMEOUT", "WPPOSTURE_PROBE_TIMEOUT", "WPPOSTURE_MAX_REDIRECTS", "WPPOSTURE_USER_AGENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings.from_env()
    assert (s.timeout, s.probe_timeout, s.max_redirects) == (8.0, 5.0, 3)
    assert s.user_agent == DEFAULT_UA
    assert ScanOptions() == ScanOptions(max_plugin_candidates=30, plugin_batch_size=10)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WPPOSTURE_TIMEOUT", "12.5")
    monkeypatch.setenv("WPPOSTURE_MAX_REDIRECTS", "0")
    monkeypatch.setenv("WPPOSTURE_USER_AGENT", "audit/1.0")
    s = Settings.from_env()
    assert s.timeout == 12.5
    assert s.max_redirects == 0
    assert s.user_agent == "audit/1.0"
    assert s.probe_timeout == 5.0


def test_bad_env_value_falls_back(monkeypatch):
    monkeypatch.setenv("WPPOSTURE_PROBE_TIMEOUT", "soon")
    assert Settings.from_env().probe_timeout == 5.0


async def test_client_carries_transport_settings():
    async with client_for(Settings(user_agent="audit/1.0", max_redirects=2, timeout=9.0)) as client:
        assert client.headers["user-agent"] == "audit/1.0"
        assert client.max_redirects == 2
        assert client.follow_redirects is True
        assert client.timeout.read == 9.0
