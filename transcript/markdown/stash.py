"""Placeholder storage for code markup that later stages must not rewrite."""

from __future__ import annotations

import logging
import re
import uuid

logger = logging.getLogger(__name__)

STX = "\x02"
ETX = "\x03"

_BLOCK_KIND = "pre"
_INLINE_KIND = "code"

_STASH_KEY = "code_stash"


class CodeStash:
    """Per-render store of committed code markup.

    Fenced blocks and inline code spans are swapped for opaque placeholder
    tokens while the header, emphasis, list and paragraph stages run, then put
    back by the code restorer postprocessor. Each stash draws a random key, so
    a placeholder cannot be forged from message text.
    """

    def __init__(self) -> None:
        self.key = uuid.uuid4().hex
        self.items: list[str] = []
        self._pattern = re.compile(
            re.escape(STX)
            + rf"({_BLOCK_KIND}|{_INLINE_KIND}):{self.key}:(\d+)"
            + re.escape(ETX)
        )

    def __len__(self) -> int:
        return len(self.items)

    def store(self, html: str, block: bool = False) -> str:
        """Keep ``html`` and return the placeholder that stands in for it."""
        self.items.append(html)
        kind = _BLOCK_KIND if block else _INLINE_KIND
        return f"{STX}{kind}:{self.key}:{len(self.items) - 1}{ETX}"

    def is_block(self, text: str) -> bool:
        """True if ``text`` starts with a fenced-block placeholder."""
        return text.startswith(f"{STX}{_BLOCK_KIND}:{self.key}:")

    def restore(self, text: str) -> str:
        """Replace every placeholder in ``text`` with its stored markup."""
        if not self.items:
            return text

        def _replace(match: re.Match) -> str:
            index = int(match.group(2))
            if index >= len(self.items):
                logger.warning(f"Unknown code placeholder index {index}, dropping it")
                return ""
            return self.items[index]

        return self._pattern.sub(_replace, text)


def get_code_stash(context: dict) -> CodeStash | None:
    """Return the stash of this render call, or None when protection is off."""
    return context.get(_STASH_KEY)


def start_code_stash(context: dict) -> CodeStash:
    """Attach a fresh stash to the render context."""
    stash = CodeStash()
    context[_STASH_KEY] = stash
    return stash


def protect(html: str, context: dict, block: bool = False) -> str:
    """Stash ``html`` when protection is on, otherwise return it unchanged."""
    stash = get_code_stash(context)
    if stash is None:
        return html
    return stash.store(html, block=block)
