"""Exception classes for memomark.

Parsing is total over all string input, so there is no parse error here.
Errors are limited to invalid configuration and renderer failures.
"""

from __future__ import annotations


class MemomarkError(Exception):
    """Base exception for all memomark errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(MemomarkError):
    """Invalid render configuration.

    Raised when a RenderConfig or PageSetup is constructed with values
    that no renderer can honour (negative line limit, zero-sized page).
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending configuration field
            message: Description of what is wrong with the value
        """
        self.field_name = field_name
        super().__init__(f"Invalid config '{field_name}': {message}")


class RenderError(MemomarkError):
    """Error during rendering.

    Raised when a renderer receives a node it cannot lay out
    or fails to produce its output (for example writing a PDF).
    """

    def __init__(self, message: str, line_index: int | None = None) -> None:
        """Initialize render error with optional source line.

        Args:
            message: Error description
            line_index: Zero-based source line of the offending block
        """
        self.message = message
        self.line_index = line_index

        location = f"line {line_index + 1}: " if line_index is not None else ""
        super().__init__(f"{location}{message}")
