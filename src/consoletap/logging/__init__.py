"""
Diagnostic logging for consoletap itself.

structlog for the pipeline, orjson for the JSON format. Only tap lifecycle
events are logged here, never the intercepted console traffic.
"""

from .core import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]
