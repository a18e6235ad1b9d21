"""
Exceptions raised by hbs-extract.

All expected errors that should be displayed to the user
as clean messages (without stack traces) inherit from HbsExtractError.

Programming errors and bugs should NOT inherit from HbsExtractError -
they propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional


class HbsExtractError(Exception):
    """
    Base class for all user-facing errors.

    These errors indicate problems that the user can fix:
    a missing parser, malformed tag sources, invalid script source.
    """
    pass


class ParserRequiredError(HbsExtractError, TypeError):
    """The parse function was not supplied or is not callable."""
    pass


class ConfigError(HbsExtractError, ValueError):
    """Malformed hbs tag sources or configuration file."""
    pass


class ScriptSyntaxError(SyntaxError, HbsExtractError):
    """
    Script source is not valid in the grammar of the selected parser.

    Carries the standard SyntaxError location attributes:
    `lineno` (1-based), `offset` (1-based column) and `text` (the source line).
    """

    def __init__(
        self,
        msg: str,
        *,
        lineno: int,
        column: int,
        text: str = "",
        filename: Optional[str] = None,
    ):
        super().__init__(msg, (filename or "<source>", lineno, column + 1, text))


__all__ = ["HbsExtractError", "ParserRequiredError", "ConfigError", "ScriptSyntaxError"]
