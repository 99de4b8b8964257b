# transcript/markdown/postprocessors/__init__.py

from .code_restorer import restore_code
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    restore_code,  # Must be first: later steps need the real code markup
    sanitize_html,  # No-op unless SANITIZE_OUTPUT is enabled
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
