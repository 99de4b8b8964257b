import os
import sys
from pathlib import Path

import django
import pytest

# Make `ChatViewer` and `transcript` importable when running pytest from the
# repo root without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ChatViewer.settings")
django.setup()

from transcript.markdown.stash import start_code_stash  # noqa: E402


@pytest.fixture()
def context():
    """Bare render context without code protection."""
    return {}


@pytest.fixture()
def protected_context():
    ctx = {}
    start_code_stash(ctx)
    return ctx
