import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

DEFAULT_RENDER_CONFIG = {
    # Hide committed code markup from the later regex stages
    "PROTECT_CODE": True,
    # Run the bleach allowlist pass over the final fragment
    "SANITIZE_OUTPUT": False,
    "PREFORMATTED_CLASS": "pre-wrap",
    "CODE_CLASS_PREFIX": "language-",
}


def get_render_config(overrides=None):
    """
    Configuration for chat message rendering.

    Values come from the ``CHAT_MARKDOWN`` dict in Django settings, merged over
    ``DEFAULT_RENDER_CONFIG``. Reading the setting loads the module named by
    DJANGO_SETTINGS_MODULE if nothing has touched settings yet; with no
    settings at all (the renderer used as a plain library) the defaults
    apply. ``overrides`` wins over both and is how a single render call
    adjusts behaviour.
    """
    config = dict(DEFAULT_RENDER_CONFIG)

    try:
        config.update(getattr(settings, "CHAT_MARKDOWN", None) or {})
    except ImproperlyConfigured:
        logger.debug("Django settings not configured, using default render config")

    if overrides:
        config.update(overrides)

    return config
