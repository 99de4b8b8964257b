# transcript/markdown/preprocessors/code_blocks.py
"""
Preprocessors that turn fenced code and inline code into code markup.

Fenced blocks:
    ```python
    print("hi")
    ```

    → <pre><code class="language-python">print(&quot;hi&quot;)</code></pre>

Inline code:
    use `pip install` here

    → use <code>pip install</code> here

Both run on already escaped text, so the code content is copied verbatim.
Fences need an opening and a closing marker; an unterminated fence is left
as plain text for the later stages.

When code protection is enabled the generated markup is parked in the
render's CodeStash and replaced by a placeholder, which keeps the header,
emphasis and list stages from rewriting code content.
"""

import logging
import re

from ..stash import protect

logger = logging.getLogger(__name__)

FENCED_CODE_PATTERN = re.compile(r"```([\w+#.-]+)?[ \t]*\n(.*?)```", re.DOTALL)

INLINE_CODE_PATTERN = re.compile(r"`([^`\n]+)`")


def fenced_code(text: str, context: dict, class_prefix: str = "language-") -> str:
    """
    Convert fenced code regions into <pre><code> blocks.

    Args:
        text: Escaped message text
        context: Render context (holds the code stash when protection is on)
        class_prefix: Prefix for the language class on <code>

    Returns:
        Text with every closed fence replaced by code block markup
    """
    count = 0

    def replace_fence(match):
        nonlocal count
        count += 1
        language = match.group(1) or ""
        code = match.group(2).strip()
        html = f'<pre><code class="{class_prefix}{language}">{code}</code></pre>'
        return protect(html, context, block=True)

    text = FENCED_CODE_PATTERN.sub(replace_fence, text)

    if count:
        logger.debug(f"Extracted {count} fenced code block(s)")

    return text


def inline_code(text: str, context: dict) -> str:
    """Convert `code` spans into <code> elements."""

    def replace_span(match):
        return protect(f"<code>{match.group(1)}</code>", context)

    return INLINE_CODE_PATTERN.sub(replace_span, text)


def fenced_code_default(text: str, context: dict) -> str:
    """
    Default configuration for fenced_code.

    This is the function that should be registered in PREPROCESSORS.
    """
    config = context.get("config", {})
    return fenced_code(
        text,
        context,
        class_prefix=config.get("CODE_CLASS_PREFIX", "language-"),
    )
