"""
Exception hierarchy for bezierclip.

Interval arithmetic itself never raises for numeric degeneration:
infinities and NaN propagate as IEEE results. Exceptions are reserved
for broken caller contracts (a bound index other than 0 or 1, an empty
sample sequence) and for configuration problems.

All exceptions carry optional context and suggestions:

Example::

    from bezierclip.exceptions import BoundIndexError

    raise BoundIndexError(
        "Interval bound index out of range",
        context={"index": 2, "valid": "0 or 1"},
        suggestions=["Use 0 for the lower bound and 1 for the upper bound"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class BezierClipError(Exception):
    """
    Base exception for all bezierclip errors.

    Attributes:
        context: Dictionary of contextual information (index, sizes, file, ...)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class PreconditionError(BezierClipError):
    """
    A documented caller contract was violated.

    Concrete subclasses also derive from the matching built-in exception,
    so ``except IndexError`` and ``except ValueError`` keep working.
    """

    pass


class BoundIndexError(PreconditionError, IndexError):
    """
    An interval bound was addressed with an index other than 0 or 1.

    Example::

        raise BoundIndexError(
            "Interval bound index out of range",
            context={"index": 2, "valid": "0 or 1"},
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        index: Optional[int] = None,
    ):
        ctx = context or {}
        if index is not None and "index" not in ctx:
            ctx["index"] = index
        self.index = index
        super().__init__(message, ctx, suggestions)


class EmptySequenceError(PreconditionError, ValueError):
    """
    An enclosing interval was requested over zero values.

    Example::

        raise EmptySequenceError(
            "Cannot build an interval from an empty sequence",
            suggestions=["Use Interval() for the empty interval"],
        )
    """

    pass


class ConfigError(BezierClipError):
    """
    Configuration file or setting is invalid.

    Example::

        raise ConfigError(
            "Invalid TOML in .bezierclip.toml",
            context={"file": ".bezierclip.toml"},
            suggestions=["Check the file with a TOML validator"],
        )
    """

    pass


__all__ = [
    "BezierClipError",
    "PreconditionError",
    "BoundIndexError",
    "EmptySequenceError",
    "ConfigError",
]
