# transcript/markdown/blockprocessors/lists.py
"""
Block processor that groups bullet and numbered lines into lists.

Each blank-line separated block is scanned line by line with a small state
machine. The state is the type of the list currently open (none, <ul> or
<ol>):

    - apples             <ul>
    - pears              <li>apples</li>
    1. wash              <li>pears</li>
    2. slice      →      </ul>
    done                 <ol>
                         <li>wash</li>
                         <li>slice</li>
                         </ol>
                         done

A change of marker type always closes the open list and opens a new one,
even without a blank line in between. Blocks that already hold a table are
left alone. Nested lists are not supported.
"""

import re
from enum import Enum
from typing import List, Optional, Tuple

UNORDERED_ITEM_PATTERN = re.compile(r"^[-*]\s+")

ORDERED_ITEM_PATTERN = re.compile(r"^\d+\.\s+")


class ListState(Enum):
    NONE = "none"
    UNORDERED = "ul"
    ORDERED = "ol"


def classify_line(line: str) -> Tuple[ListState, Optional[str]]:
    """
    Work out which list type a line belongs to.

    Returns the list state the line asks for and the item content with the
    marker stripped, or (ListState.NONE, None) for a non-item line.
    """
    for state, pattern in (
        (ListState.UNORDERED, UNORDERED_ITEM_PATTERN),
        (ListState.ORDERED, ORDERED_ITEM_PATTERN),
    ):
        match = pattern.match(line)
        if match:
            return state, line[match.end():]
    return ListState.NONE, None


def transition(state: ListState, line: str) -> Tuple[ListState, List[str]]:
    """
    Feed one line to the list state machine.

    Args:
        state: The list type currently open
        line: Next line of the block

    Returns:
        The new state and the markup lines to emit for this line
    """
    line_state, content = classify_line(line)
    emitted = []

    if line_state is ListState.NONE:
        if state is not ListState.NONE:
            emitted.append(f"</{state.value}>")
        emitted.append(line)
        return ListState.NONE, emitted

    if line_state is not state:
        if state is not ListState.NONE:
            emitted.append(f"</{state.value}>")
        emitted.append(f"<{line_state.value}>")

    emitted.append(f"<li>{content}</li>")
    return line_state, emitted


def group_list_items(block: str) -> str:
    """Run the state machine over one block."""
    if "<table>" in block:
        return block

    state = ListState.NONE
    result = []

    for line in block.split("\n"):
        state, emitted = transition(state, line)
        result.extend(emitted)

    if state is not ListState.NONE:
        result.append(f"</{state.value}>")

    return "\n".join(result)


def lists(text, context):
    """Group list items in every block of the text."""
    return "\n\n".join(group_list_items(block) for block in text.split("\n\n"))
