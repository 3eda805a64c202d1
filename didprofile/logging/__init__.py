"""Logging setup for didprofile."""

from didprofile.logging.setup import bind_invocation_context, configure_logging, get_logger

__all__ = ["bind_invocation_context", "configure_logging", "get_logger"]
