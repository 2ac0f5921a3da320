"""Exception classes for Charla.

Parsing and token rendering never raise: malformed input degrades to plain
text. These exceptions cover the host-facing edges, such as a node builder
meeting output it cannot materialize.
"""

from __future__ import annotations


class CharlaError(Exception):
    """Base exception for all Charla errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(CharlaError):
    """Error while materializing output nodes.

    Raised by a node builder when it is handed a node role it does not
    know how to build.
    """

    def __init__(self, message: str, role: str | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            role: Role name of the offending node (optional)
        """
        self.role = role
        prefix = f"[{role}] " if role else ""
        super().__init__(f"{prefix}{message}")
