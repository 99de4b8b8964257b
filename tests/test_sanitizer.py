import logging

from bs4 import BeautifulSoup

from transcript.markdown.postprocessors import sanitizer
from transcript.markdown.postprocessors.sanitizer import sanitize_html
from transcript.markdown.renderer import render_message

STRICT = {"config": {"SANITIZE_OUTPUT": True}}


def test_disabled_by_default():
    html = "<div>x</div>"
    assert sanitize_html(html, {"config": {}}) == html


def test_disallowed_tags_are_escaped():
    out = sanitize_html("<div>x</div><p>y</p>", STRICT)
    assert "<div>" not in out
    assert "<p>y</p>" in out


def test_disallowed_attributes_are_removed():
    out = sanitize_html('<p onclick="x()">y</p>', STRICT)
    assert out == "<p>y</p>"


def test_rendered_paragraph_is_unchanged():
    assert render_message("hello world", context=STRICT) == "<p>hello world</p>"


def test_code_class_is_kept():
    out = render_message("```js\nconst x = 1;\n```", context=STRICT)
    assert out == '<pre><code class="language-js">const x = 1;</code></pre>'


def test_tables_survive_sanitizing():
    soup = BeautifulSoup(render_message("|a|b|\n|-|-|", context=STRICT), "html.parser")
    assert [cell.name for cell in soup.find_all(["td", "th"])] == ["td", "td", "th", "th"]


def test_failure_returns_rendered_markup(monkeypatch, caplog):
    def broken_clean(*args, **kwargs):
        raise ValueError("parser exploded")

    monkeypatch.setattr(sanitizer.bleach, "clean", broken_clean)

    with caplog.at_level(logging.ERROR, logger="transcript.markdown.postprocessors.sanitizer"):
        out = sanitize_html("<p>x</p>", STRICT)

    assert out == "<p>x</p>"
    assert "Bleach sanitization failed" in caplog.text
