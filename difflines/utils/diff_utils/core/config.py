"""
Configuration settings for diff parsing.

This module provides centralized configuration for the parsing parameters
that can be adjusted based on the specific use case or environment.
Explicit arguments passed to the parser always take precedence.
"""

import os

# Normalization settings
COLLAPSE_IDENTICAL_ENABLED = True       # Rewrite identical delete/add pairs as context
ALLOW_NO_NEWLINE_MARKER = False         # Skip "\ No newline at end of file" lines instead of failing
CHECK_COUNTS_ENABLED = True             # Warn when a hunk body disagrees with its header counts

# Request limits
DEFAULT_MAX_DIFF_BYTES = 5 * 1024 * 1024

# Environment variable names for configuration overrides
ENV_PREFIX = "DIFFLINES_DIFF_"
ENV_COLLAPSE_IDENTICAL = f"{ENV_PREFIX}COLLAPSE_IDENTICAL"
ENV_ALLOW_NO_NEWLINE_MARKER = f"{ENV_PREFIX}ALLOW_NO_NEWLINE_MARKER"
ENV_CHECK_COUNTS = f"{ENV_PREFIX}CHECK_COUNTS"
ENV_MAX_DIFF_BYTES = f"{ENV_PREFIX}MAX_DIFF_BYTES"


def get_config_value(env_var: str, default_value):
    """
    Get a configuration value from environment variable or use default.

    Args:
        env_var: The environment variable name
        default_value: The default value to use if env var is not set

    Returns:
        The configuration value, converted to the type of default_value
    """
    value = os.environ.get(env_var)
    if value is None:
        return default_value

    try:
        if isinstance(default_value, bool):
            return value.strip().lower() in ('true', 'yes', '1', 'y')
        elif isinstance(default_value, int):
            return int(value)
        elif isinstance(default_value, float):
            return float(value)
        else:
            return value
    except (ValueError, TypeError):
        return default_value


def is_collapse_enabled():
    """Check if identical delete/add pairs should be collapsed to context."""
    return get_config_value(ENV_COLLAPSE_IDENTICAL, COLLAPSE_IDENTICAL_ENABLED)


def is_no_newline_marker_allowed():
    """Check if "\\ No newline at end of file" lines are skipped."""
    return get_config_value(ENV_ALLOW_NO_NEWLINE_MARKER, ALLOW_NO_NEWLINE_MARKER)


def is_count_check_enabled():
    """Check if hunk bodies are compared against their header counts."""
    return get_config_value(ENV_CHECK_COUNTS, CHECK_COUNTS_ENABLED)


def get_max_diff_bytes():
    """Get the largest diff (in UTF-8 bytes) the HTTP API will accept."""
    max_bytes = get_config_value(ENV_MAX_DIFF_BYTES, DEFAULT_MAX_DIFF_BYTES)
    return max(0, max_bytes)
