# transcript/markdown/postprocessors/code_restorer.py

import logging

from ..stash import get_code_stash

logger = logging.getLogger(__name__)


def restore_code(html, context):
    """
    Put stashed code markup back in place of its placeholders.
    Runs after paragraph assembly, so a fenced block with blank lines inside
    is never split across paragraphs.
    """
    stash = get_code_stash(context)
    if stash is None or not len(stash):
        return html

    logger.debug(f"Restoring {len(stash)} code region(s)")
    return stash.restore(html)
