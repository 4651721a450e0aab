"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def clean_diff_env(monkeypatch):
    """Remove DIFFLINES_DIFF_* overrides so tests see the built-in defaults."""
    from difflines.utils.diff_utils.core import config
    for name in (config.ENV_COLLAPSE_IDENTICAL, config.ENV_ALLOW_NO_NEWLINE_MARKER,
                 config.ENV_CHECK_COUNTS, config.ENV_MAX_DIFF_BYTES):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def sample_diff():
    """A two-hunk git diff with a preamble, a fake replacement and a real one."""
    return (
        "diff --git a/greet.py b/greet.py\n"
        "index 3b18e51..a9c2f11 100644\n"
        "--- a/greet.py\n"
        "+++ b/greet.py\n"
        "@@ -1,3 +1,4 @@ import os\n"
        " import sys\n"
        "-def greet():\n"
        "+def greet():\n"
        "+    \"\"\"Say hello.\"\"\"\n"
        "     pass\n"
        "@@ -10,2 +11,2 @@ def main():\n"
        "-    greet()\n"
        "+    greet(name)\n"
        "     return 0\n"
    )
