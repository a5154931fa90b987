"""Utility modules for rstclass.

Provides:
- logger: get_logger for logging
"""

from rstclass.utils.logger import get_logger

__all__ = ["get_logger"]
