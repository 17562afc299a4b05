"""Observability: structured logging with secret redaction."""

from stageconf.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
