from __future__ import annotations

"""
Domain Error Hierarchy.

Every failure the tool reports on purpose derives from LocaleflatError so
interface layers can tell expected errors apart from crashes.
"""


class LocaleflatError(Exception):
    """Base exception for all localeflat errors."""


class UsageError(LocaleflatError):
    """Raised when the tool is invoked without its required arguments."""


class LocaleParseError(LocaleflatError):
    """
    A located file could not be interpreted as a locale document.

    Attributes:
        rel_path: File path relative to the project root.
        reason: Description of the underlying failure.
    """

    def __init__(self, rel_path: str, reason: str) -> None:
        self.rel_path = rel_path
        self.reason = reason
        super().__init__(f"Failed to parse locale file '{rel_path}': {reason}")
