import logging

from conftest import WP_HTML

from wpposture.core.detector import detect_wordpress


def test_single_indicator_is_not_wordpress():
    result = detect_wordpress('<img src="/wp-content/uploads/a.png">')
    assert result.indicators.wp_content
    assert not result.is_wordpress
    assert result.confidence == 25


def test_three_indicators():
    html = '<link href="/wp-content/a.css"><script src="/wp-includes/b.js"></script><link href="/wp-json/">'
    result = detect_wordpress(html)
    assert result.is_wordpress
    assert result.confidence == 75
    assert not result.indicators.generator_meta
    assert not result.indicators.wp_emoji


def test_full_page_is_capped_at_100():
    result = detect_wordpress(WP_HTML)
    assert result.is_wordpress
    assert result.indicators.count() == 5
    assert result.confidence == 100


def test_generator_check_ignores_case_and_attribute_order():
    html = '<meta content="WORDPRESS 6.1" name="Generator"><a href="/wp-json/">'
    result = detect_wordpress(html)
    assert result.indicators.generator_meta
    assert result.is_wordpress


def test_empty_page():
    result = detect_wordpress("")
    assert not result.is_wordpress
    assert result.confidence == 0


def test_serializes_with_wire_names():
    data = detect_wordpress(WP_HTML).model_dump(by_alias=True)
    assert data["isWordPress"] is True
    assert set(data["indicators"]) == {"wpContent", "wpIncludes", "generatorMeta", "wpEmoji", "wpJson"}


def test_verdict_logged_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="wpposture.core.detector"):
        detect_wordpress(WP_HTML)
    records = [r for r in caplog.records if r.name == "wpposture.core.detector"]
    assert records[0].levelno == logging.INFO
    assert "wordpress detected: True (5/5 indicators)" in records[0].getMessage()
