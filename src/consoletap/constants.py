"""
consoletap constants.

Single source of truth for output kinds, sink names and file sink layout.
"""

from __future__ import annotations

import os


# ================================
# Output kinds
# ================================

OUTPUT_KINDS: tuple[str, ...] = ("log", "warn", "error", "debug")

# Kinds written to stderr by the default console
STDERR_KINDS = frozenset({"warn", "error"})


# ================================
# Sinks
# ================================

SINK_NAMES: tuple[str, ...] = ("file", "memory", "emit")

# <kind>_<year>_<month>_<day>.log, UTC calendar date, no zero padding
FILE_NAME_TEMPLATE = "{kind}_{year}_{month}_{day}.log"

LINE_TERMINATOR = os.linesep


# ================================
# Environment
# ================================

ENV_PREFIX = "CONSOLETAP_"
LOG_ENV_PREFIX = "CONSOLETAP_LOG_"
