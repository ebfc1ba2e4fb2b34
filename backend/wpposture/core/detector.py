import logging
import re

from wpposture.models.schemas import DetectionResult, Indicators

log = logging.getLogger(__name__)

MIN_INDICATORS = 2
POINTS_PER_INDICATOR = 25

# attribute order varies between themes
GENERATOR_RE = re.compile(
    r"<meta[^>]*generator[^>]*wordpress|<meta[^>]*wordpress[^>]*generator", re.I
)


def detect_wordpress(html: str) -> DetectionResult:
    html = html or ""
    indicators = Indicators(
        wp_content="/wp-content/" in html,
        wp_includes="/wp-includes/" in html,
        generator_meta=bool(GENERATOR_RE.search(html)),
        wp_emoji="wp-emoji" in html,
        wp_json="/wp-json/" in html,
    )
    hits = indicators.count()
    result = DetectionResult(
        indicators=indicators,
        is_wordpress=hits >= MIN_INDICATORS,
        confidence=min(100, hits * POINTS_PER_INDICATOR),
    )
    log.info("wordpress detected: %s (%d/5 indicators)", result.is_wordpress, hits)
    return result
