# transcript/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = frozenset(
        {
            # text
            "p",
            "br",
            "strong",
            "em",
            # headings
            "h1",
            "h2",
            "h3",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            # code
            "pre",
            "code",
            # tables (html5lib adds tbody when it re-parses a table)
            "table",
            "tbody",
            "tr",
            "th",
            "td",
        }
    )

    allowed_attrs = {
        "code": ["class"],
        "pre": ["class"],
    }

    return allowed_tags, allowed_attrs


def sanitize_html(html, context):
    """
    Sanitize the rendered fragment against the message tag allowlist.
    Only runs when SANITIZE_OUTPUT is enabled; the pipeline already escapes
    all message text, so this is a second line of defence.
    """
    config = context.get("config", {})
    if not config.get("SANITIZE_OUTPUT"):
        return html

    allowed_tags, allowed_attrs = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            strip=False,  # Escape disallowed tags instead of dropping them
        )

    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        # Rendered markup is built from escaped text, so it is still safe
        return html
