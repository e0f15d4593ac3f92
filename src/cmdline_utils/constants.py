"""Default templates and fixed description text.

These values are part of the public contract: applications that call
the convenience binders without a custom template get exactly these.
"""

from __future__ import annotations

DEFAULT_HELP_TEMPLATE: str = "-?|-h|--help"
"""Short, short-alternate and long form of the help flag."""

DEFAULT_VERSION_TEMPLATE: str = "--version"

DEFAULT_VERBOSE_TEMPLATE: str = "-v|--verbose"

HELP_OPTION_DESCRIPTION: str = "Show help information."

VERSION_OPTION_DESCRIPTION: str = "Show version information."

VERBOSE_OPTION_DESCRIPTION: str = "Show verbose output"

LOGGER_NAME: str = "cmdline_utils"
"""Root logger for the package; library code never configures it on import."""
