#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the notion2md library.

This module defines specialized exception classes for the error conditions
that can occur while fetching Notion content and rendering it to a text
format. These exceptions provide more specific error information than
generic built-ins.

Exception Hierarchy
-------------------
- Notion2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)
    - InvalidPageReferenceError (page URL or id cannot be parsed)

  - ConfigurationError (missing token, unreadable config file)

  - FormatError (unknown export format)

  - SourceFetchError (page or block retrieval failures)
    - NotionAPIError (error status returned by the Notion API)

  - RenderingError (output generation failures)
    - BlockTypeMismatchError (renderer called with the wrong block variant)
    - OutputWriteError (file write failures)

  - FileError (file access and I/O)
    - ImageDownloadError (image fetch or persistence failures)

"""

from typing import Any


class Notion2MdError(Exception):
    """Base exception class for all notion2md-specific errors.

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


class ValidationError(Notion2MdError):
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
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidPageReferenceError(ValidationError):
    """Exception raised when no page id can be found in a page reference.

    Parameters
    ----------
    reference : str
        The page URL or identifier supplied by the user

    """

    def __init__(self, reference: str, message: str | None = None):
        """Initialize the invalid page reference error."""
        if message is None:
            message = f"Could not detect a valid page id in '{reference}'"
        super().__init__(message, parameter_name="page", parameter_value=reference)
        self.reference = reference


class ConfigurationError(Notion2MdError):
    """Exception raised when configuration cannot be resolved.

    This covers a missing integration token as well as configuration files
    that cannot be read or parsed.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the configuration file involved, if any
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class FormatError(Notion2MdError):
    """Exception raised when an export format has no renderer.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format name
    supported_formats : list[str], optional
        List of supported formats for reference

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"No renderer support for format '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Export format is not supported"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class SourceFetchError(Notion2MdError):
    """Exception raised when a page or its blocks cannot be retrieved.

    Parameters
    ----------
    message : str
        Description of the retrieval failure
    resource_id : str, optional
        Id of the page or block being fetched
    original_error : Exception, optional
        The underlying transport exception

    """

    def __init__(self, message: str, resource_id: str | None = None, original_error: Exception | None = None):
        """Initialize the source fetch error."""
        super().__init__(message, original_error=original_error)
        self.resource_id = resource_id


class NotionAPIError(SourceFetchError):
    """Exception raised when the Notion API answers with an error status.

    Parameters
    ----------
    message : str
        Error message reported by the API
    status_code : int
        HTTP status code of the response
    code : str, optional
        Notion error code (e.g. ``object_not_found``)
    resource_id : str, optional
        Id of the page or block being fetched

    """

    def __init__(self, message: str, status_code: int, code: str = "", resource_id: str | None = None):
        """Initialize the API error."""
        super().__init__(message, resource_id=resource_id)
        self.status_code = status_code
        self.code = code


class RenderingError(Notion2MdError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class BlockTypeMismatchError(RenderingError):
    """Exception raised when a renderer receives a block of the wrong variant.

    This signals a programming error in a caller or an override, not a
    condition the exporter recovers from.

    Parameters
    ----------
    expected : str
        The block type the render operation handles
    received : str
        The block type it was given

    """

    def __init__(self, expected: str, received: str):
        """Initialize the mismatch error."""
        super().__init__(
            f"Renderer for '{expected}' blocks was passed a '{received}' block",
            rendering_stage=expected,
        )
        self.expected = expected
        self.received = received


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class FileError(Notion2MdError):
    """Base exception for file access and I/O errors.

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


class ImageDownloadError(FileError):
    """Exception raised when a Notion-hosted image cannot be saved locally.

    Parameters
    ----------
    message : str
        Description of the failure
    url : str
        The image URL
    file_path : str, optional
        Local destination of the image
    status_code : int, optional
        HTTP status code when the download returned a non-200 response

    """

    def __init__(
        self,
        message: str,
        url: str,
        file_path: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the image download error."""
        super().__init__(message, file_path=file_path, original_error=original_error)
        self.url = url
        self.status_code = status_code
