# transcript/markdown/preprocessors/inline_formatting.py
"""
Preprocessor for headings, bold, italic and horizontal rules.

    # Title        → <h1>Title</h1>
    ## Section     → <h2>Section</h2>
    ### Topic      → <h3>Topic</h3>
    **bold**       → <strong>bold</strong>
    *italic*       → <em>italic</em>
    ---            → <hr>

Only levels 1-3 are recognised; "####" and deeper stay as text. A heading
marker must open the line, so text indented by four spaces is never a
heading. Bold runs before italic so "**x**" is not half-eaten by the italic
rule. An italic span cannot open on "* ", so bullet markers survive for the
list stage (and "a * b * c" stays plain text). All rules apply to the whole text, table cells included.
"""

import re

HEADING_PATTERN = re.compile(r"^(#{1,3}) (.*)$", re.MULTILINE)

BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")

ITALIC_PATTERN = re.compile(r"\*(?!\s)(.+?)\*")

RULE_PATTERN = re.compile(r"^---$", re.MULTILINE)


def _replace_heading(match):
    level = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


def inline_formatting(text, context):
    text = HEADING_PATTERN.sub(_replace_heading, text)
    text = BOLD_PATTERN.sub(r"<strong>\1</strong>", text)
    text = ITALIC_PATTERN.sub(r"<em>\1</em>", text)
    text = RULE_PATTERN.sub("<hr>", text)
    return text
