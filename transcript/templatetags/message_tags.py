# transcript/templatetags/message_tags.py

from django import template
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from transcript.markdown.renderer import render_message

register = template.Library()


@register.filter(name="chat_markdown")
def chat_markdown_filter(value):
    # render_message escapes all message text before adding its own tags
    return mark_safe(render_message(value))


@register.filter(name="chat_markdown_strict")
def chat_markdown_strict_filter(value):
    """Render a message and also run the bleach allowlist pass"""
    return mark_safe(
        render_message(value, context={"config": {"SANITIZE_OUTPUT": True}})
    )


@register.simple_tag
def chat_message(value, role="assistant"):
    """
    Render a message body inside the container the conversation view expects.

    Usage in templates:
        {% chat_message answer.content role="assistant" %}
    """
    return format_html(
        '<div class="message-text message-{}">{}</div>',
        role,
        mark_safe(render_message(value)),
    )
