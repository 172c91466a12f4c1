#  Copyright (c) 2026 termmark contributors
"""Custom exceptions for the termmark library.

This module defines specialized exception classes for the error conditions
that can occur while configuring a renderer, reading Markdown input and
rendering a document tree to terminal text.

Exception Hierarchy
-------------------
- TermmarkError (base exception)

  - ValidationError (configuration validation)

  - ParsingError (Markdown input failures)

  - RenderingError (malformed document tree)

"""

from typing import Any


class TermmarkError(Exception):
    """Base exception class for all termmark-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TermmarkError):
    """Exception raised for invalid configuration values.

    Raised before any document is converted, for example for an unknown
    color mode, an unknown symbol or theme element name, or a style that
    cannot be parsed. All offending names are reported in one message.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ParsingError(TermmarkError):
    """Exception raised when Markdown input cannot be read or parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(TermmarkError):
    """Exception raised when a document tree is structurally invalid.

    This exception is raised for caller errors that would otherwise
    produce silently misaligned output, such as:
    - A link node without an href
    - Table rows with differing cell counts

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
