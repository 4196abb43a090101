"""
Logging configuration and utilities for the bonding curve library.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
