"""Utility helpers (re-exports)."""

from .log_setup import setup_logging

__all__ = ["setup_logging"]
