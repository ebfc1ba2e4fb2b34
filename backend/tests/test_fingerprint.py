from conftest import WP_HTML

from wpposture.core.fingerprint import extract_plugin_slugs, extract_theme, extract_version


def test_generator_meta_wins():
    info = extract_version(WP_HTML)
    assert info.version == "5.9"
    assert info.source == "generator-meta"


def test_emoji_script_before_asset_version():
    html = (
        '<link href="/wp-content/themes/x/style.css?ver=1.2.3">'
        '<script src="/wp-includes/js/wp-emoji-release.min.js?ver=6.4.2"></script>'
    )
    info = extract_version(html)
    assert (info.version, info.source) == ("6.4.2", "wp-emoji")


def test_asset_version_fallback():
    info = extract_version('<script src="/wp-includes/js/jquery.js?ver=3.7.1"></script>')
    assert (info.version, info.source) == ("3.7.1", "asset-version")


def test_no_version():
    info = extract_version("<html></html>")
    assert info.version is None
    assert info.source == "unknown"


def test_generator_is_case_insensitive():
    info = extract_version("<META NAME='generator' CONTENT='wordpress 6.5.2'>")
    assert info.version == "6.5.2"


def test_extract_theme():
    assert extract_theme(WP_HTML) == "astra"
    assert extract_theme("<html></html>") is None


def test_extract_plugin_slugs_distinct_in_order():
    html = (
        '<script src="/wp-content/plugins/elementor/a.js"></script>'
        '<script src="/wp-content/plugins/akismet/b.js"></script>'
        '<link href="/wp-content/plugins/elementor/c.css">'
    )
    assert extract_plugin_slugs(html) == ["elementor", "akismet"]
    assert extract_plugin_slugs("") == []
