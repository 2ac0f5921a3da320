"""Logger lookup for Charla modules.

Every Charla logger lives under the ``charla`` namespace, so a host can
silence or raise the whole package with one ``logging.getLogger("charla")``
call. The loggers in use are ``charla.lexer.scanners.url`` (URLs that could
not be decomposed), ``charla.renderers.core`` (URLs rejected by
``sanitize_url``) and ``charla.renderers.context`` (peer-name lookups that
raised). All of them log at DEBUG only.

Example:
    >>> import logging
    >>> logging.getLogger("charla").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``charla`` namespace.

    Module names already under ``charla`` pass through unchanged, so
    ``get_logger(__name__)`` from ``charla.renderers.context`` yields that
    exact logger. Any other name is nested below ``charla.``.

    Example:
        >>> get_logger("charla.renderers.context").name
        'charla.renderers.context'
        >>> get_logger("host").name
        'charla.host'
    """
    if not (name == "charla" or name.startswith("charla.")):
        name = f"charla.{name}"
    return logging.getLogger(name)
