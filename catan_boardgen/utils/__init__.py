"""Shared helpers for the command line front end."""

from .logging import setup_logging

__all__ = ["setup_logging"]
