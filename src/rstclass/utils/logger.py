"""Logging for rstclass.

Modules log through loggers under the ``rstclass`` namespace so that
applications can tune them with a single ``logging.getLogger("rstclass")``.
The package only emits DEBUG records (parse summaries, fallback rendering)
and never configures handlers itself.

Example:
    >>> from rstclass.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendered %d nodes", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``rstclass`` namespace.

    Names already under ``rstclass`` are used as-is; anything else is
    nested beneath it.

    Example:
        >>> get_logger("mymodule").name
        'rstclass.mymodule'
        >>> get_logger("rstclass.parser").name
        'rstclass.parser'
    """
    if name != "rstclass" and not name.startswith("rstclass."):
        name = f"rstclass.{name}"
    return logging.getLogger(name)
