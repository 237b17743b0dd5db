#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the wpreadme library.

This module defines the exception classes raised by the parser, the generator
and the command-line front end. Malformed readme content never raises: the
parser degrades to a partial document instead. Only precondition failures and
programming errors surface as exceptions.

Exception Hierarchy
-------------------
- WpReadmeError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser/renderer)
    - InvalidInputError (readme text is not a string or is too large)

  - FileError (file access and upload checks)

  - ParsingError (unexpected parser failures)

  - RenderingError (output generation failures)

"""

from typing import Any


class WpReadmeError(Exception):
    """Base exception class for all wpreadme-specific errors.

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


class ValidationError(WpReadmeError):
    """Exception raised for invalid input parameters or options.

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidInputError(ValidationError):
    """Exception raised when readme text fails the parser preconditions.

    The parser rejects input that is not a string, or whose trimmed length
    exceeds the configured maximum. Everything else is parsed leniently.

    Parameters
    ----------
    message : str
        Description of the failed precondition
    input_length : int, optional
        Length of the rejected input, when it was a string

    """

    def __init__(self, message: str, input_length: int | None = None, original_error: Exception | None = None):
        """Initialize the invalid input error."""
        super().__init__(message, parameter_name="text", original_error=original_error)
        self.input_length = input_length


class FileError(WpReadmeError):
    """Exception raised for file access errors and rejected uploads.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(WpReadmeError):
    """Exception raised when parsing fails for reasons other than malformed content.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(WpReadmeError):
    """Exception raised when readme generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
