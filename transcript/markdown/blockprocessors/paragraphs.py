# transcript/markdown/blockprocessors/paragraphs.py
"""
Block processor that assembles the final blocks.

For every blank-line separated block:
- Empty or whitespace-only blocks are dropped
- Blocks that already open with structural markup (headings, <hr>, lists,
  code blocks, tables) are kept as they are
- Blocks with a line indented by four spaces or a tab become a
  preformatted block, with one four-space indent removed from each line
- Anything else becomes a <p>, single line breaks turned into <br>
"""

import re

from ..stash import get_code_stash

STRUCTURAL_BLOCK_PATTERN = re.compile(r"^(<[huol]|<pre|<li|<table)")

INDENTED_LINE_PATTERN = re.compile(r"^(    |\t)", re.MULTILINE)

LEADING_INDENT_PATTERN = re.compile(r"^    ", re.MULTILINE)


def is_structural(block: str, context: dict) -> bool:
    if STRUCTURAL_BLOCK_PATTERN.match(block):
        return True
    stash = get_code_stash(context)
    return stash is not None and stash.is_block(block)


def assemble_block(block: str, context: dict, preformatted_class: str = "pre-wrap") -> str:
    if not block.strip():
        return ""

    if is_structural(block, context):
        return block

    if INDENTED_LINE_PATTERN.search(block):
        content = LEADING_INDENT_PATTERN.sub("", block)
        if preformatted_class:
            return f'<pre class="{preformatted_class}">{content}</pre>'
        return f"<pre>{content}</pre>"

    return "<p>" + block.replace("\n", "<br>") + "</p>"


def paragraphs(text: str, context: dict, preformatted_class: str = "pre-wrap") -> str:
    """
    Wrap plain blocks in paragraphs and join the non-empty results.

    Args:
        text: Output of the list stage
        context: Render context (the code stash marks fenced-block placeholders)
        preformatted_class: Class on <pre> built from indented blocks

    Returns:
        The rendered fragment, blocks joined by newlines
    """
    blocks = (
        assemble_block(block, context, preformatted_class)
        for block in text.split("\n\n")
    )
    return "\n".join(block for block in blocks if block)


def paragraphs_default(text: str, context: dict) -> str:
    """
    Default configuration for paragraphs.

    This is the function that should be registered in BLOCKPROCESSORS.
    """
    config = context.get("config", {})
    return paragraphs(
        text,
        context,
        preformatted_class=config.get("PREFORMATTED_CLASS", "pre-wrap"),
    )
