from transcript.markdown.blockprocessors.lists import (
    ListState,
    classify_line,
    group_list_items,
    lists,
    transition,
)


def test_classify_line():
    assert classify_line("- apples") == (ListState.UNORDERED, "apples")
    assert classify_line("* pears") == (ListState.UNORDERED, "pears")
    assert classify_line("12. twelfth") == (ListState.ORDERED, "twelfth")
    assert classify_line("-no space") == (ListState.NONE, None)
    assert classify_line("1.no space") == (ListState.NONE, None)
    assert classify_line(" - indented") == (ListState.NONE, None)


def test_transition_opens_list():
    assert transition(ListState.NONE, "- a") == (
        ListState.UNORDERED,
        ["<ul>", "<li>a</li>"],
    )


def test_transition_continues_list():
    assert transition(ListState.UNORDERED, "* b") == (
        ListState.UNORDERED,
        ["<li>b</li>"],
    )


def test_transition_switches_list_type():
    assert transition(ListState.UNORDERED, "2. b") == (
        ListState.ORDERED,
        ["</ul>", "<ol>", "<li>b</li>"],
    )


def test_transition_closes_list_on_plain_line():
    assert transition(ListState.ORDERED, "text") == (ListState.NONE, ["</ol>", "text"])


def test_transition_plain_line_outside_list():
    assert transition(ListState.NONE, "text") == (ListState.NONE, ["text"])


def test_group_unordered_list():
    assert group_list_items("- one\n- two") == "<ul>\n<li>one</li>\n<li>two</li>\n</ul>"


def test_group_ordered_list():
    assert group_list_items("1. one\n2. two") == "<ol>\n<li>one</li>\n<li>two</li>\n</ol>"


def test_type_change_forces_new_list():
    assert group_list_items("- a\n1. b") == "<ul>\n<li>a</li>\n</ul>\n<ol>\n<li>b</li>\n</ol>"


def test_plain_line_closes_list():
    out = group_list_items("- a\nafter")
    assert out == "<ul>\n<li>a</li>\n</ul>\nafter"


def test_block_with_table_is_untouched():
    block = "<table><tr><td>a</td></tr></table>\n- not a list"
    assert group_list_items(block) == block


def test_lists_work_per_block(context):
    out = lists("- a\n\n- b", context)
    assert out == "<ul>\n<li>a</li>\n</ul>\n\n<ul>\n<li>b</li>\n</ul>"
