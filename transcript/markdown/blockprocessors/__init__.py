# transcript/markdown/blockprocessors/__init__.py

from .lists import lists
from .paragraphs import paragraphs_default

BLOCKPROCESSORS = [
    lists,  # Needs the blocks as left by the preprocessors
    paragraphs_default,  # Must be last: joins the blocks into the fragment
]


def apply_blockprocessors(text, context):
    """Apply all block processors in order"""
    for processor in BLOCKPROCESSORS:
        text = processor(text, context)
    return text
