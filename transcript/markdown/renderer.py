# transcript/markdown/renderer.py

import logging

from .blockprocessors import apply_blockprocessors
from .config import get_render_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors
from .stash import start_code_stash

logger = logging.getLogger(__name__)


def render_message(text, context=None):
    """
    Render a chat message body to an HTML fragment safe to inject as-is.

    Args:
        text: Raw message text (untrusted). None renders as an empty string.
        context: Optional dict for processors. A "config" key overrides
            individual CHAT_MARKDOWN settings for this call. The dict is
            copied, so the caller's object is never modified.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    source_length = len(text)

    context = dict(context or {})
    context["config"] = get_render_config(context.get("config"))

    if context["config"]["PROTECT_CODE"]:
        start_code_stash(context)

    # Text stages: escaping, code, tables, headings and emphasis
    text = apply_preprocessors(text, context)

    # Block stages: list grouping, then paragraph assembly
    html = apply_blockprocessors(text, context)

    # HTML stages: restore protected code, optional allowlist pass
    html = apply_postprocessors(html, context)

    logger.debug(f"Rendered message: {source_length} chars in, {len(html)} chars out")

    return html
