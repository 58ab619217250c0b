"""Utility helpers for the EWWW cloud client."""

from .logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
