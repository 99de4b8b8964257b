# transcript/markdown/preprocessors/__init__.py

from .code_blocks import fenced_code_default, inline_code
from .escape import escape_html
from .inline_formatting import inline_formatting
from .tables import tables

PREPROCESSORS = [
    escape_html,  # Must be first: everything after works on escaped text
    fenced_code_default,  # Fences before any other structural rule
    inline_code,
    tables,
    inline_formatting,  # Headings, bold, italic, horizontal rules
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
