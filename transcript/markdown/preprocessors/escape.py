# transcript/markdown/preprocessors/escape.py

from django.utils.html import escape as django_escape


def escape(text: str) -> str:
    """Escape &, <, >, " and ' to their HTML entities."""
    if not text:
        return ""
    return django_escape(text)


def escape_html(text, context):
    """
    Escape the raw message text.
    This is the FIRST preprocessor: every later stage works on escaped text
    and only adds its own tags.
    """
    return escape(text)
