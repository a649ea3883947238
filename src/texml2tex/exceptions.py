#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by texml2tex.

Every error derives from :class:`Texml2TexError`, so callers can catch one
class. The subclasses tell apart who is at fault:

- Texml2TexError

  - ValidationError: the caller passed something unusable
    - InvalidArgumentError: a public function got a value of the wrong type
    - InvalidOptionsError: a parser or renderer got the wrong options class

  - FileError: an input file could not be read
    - FileNotFoundError
    - FileAccessError

  - ParsingError: the input is not well-formed (or not safe) XML

  - RenderingError: a tree could not be turned into TeX
    - InvalidDocumentError: a ``cmd`` or ``env`` node has no name
    - OutputWriteError: the TeX could not be written out

Unrecognized node kinds and unknown ``spec`` categories are not errors;
they contribute nothing to the output.

"""

from typing import Any


class Texml2TexError(Exception):
    """Base class for texml2tex errors.

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        Lower-level exception this error wraps, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Texml2TexError):
    """A parameter or option value was rejected before any work was done."""

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidArgumentError(ValidationError, TypeError):
    """A public function was called with a value of the wrong type.

    Also a ``TypeError``, so ``except TypeError`` keeps working for callers
    that do not know about texml2tex's hierarchy.

    Parameters
    ----------
    parameter_name : str
        Name of the offending parameter
    expected : str
        What the parameter accepts, e.g. ``"str"``
    parameter_value : any
        The value received; only its type is shown in the message
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        parameter_name: str,
        expected: str,
        parameter_value: Any = None,
        message: str | None = None,
    ):
        if message is None:
            received = type(parameter_value).__name__
            message = f"Invalid argument '{parameter_name}': expected {expected}, got {received}"
        super().__init__(message, parameter_name=parameter_name, parameter_value=parameter_value)
        self.expected = expected


class InvalidOptionsError(ValidationError):
    """A parser or renderer was given options meant for another component."""

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"The {converter_name} component takes {expected_type.__name__} options, "
                f"not {received_type.__name__}"
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Texml2TexError):
    """An input file could not be read.

    Attributes
    ----------
    file_path : str or None
        The path involved

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The input path does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(message or f"No such TeXML file: {file_path}", file_path, original_error)


class FileAccessError(FileError):
    """The input path exists but reading it failed."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(message or f"Could not read TeXML file: {file_path}", file_path, original_error)


class ParsingError(Texml2TexError):
    """The input could not be parsed into a node tree.

    Parameters
    ----------
    message : str
        What went wrong
    parsing_stage : str, optional
        ``"xml_parsing"`` for malformed markup, ``"xml_security"`` for
        markup using forbidden constructs such as entity declarations
    original_error : Exception, optional
        The XML library's exception
    line, column : int, optional
        Position of the error in the input, when the XML parser reports one

    """

    def __init__(
        self,
        message: str,
        parsing_stage: str | None = None,
        original_error: Exception | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
        self.line = line
        self.column = column


class RenderingError(Texml2TexError):
    """TeX output could not be produced.

    ``rendering_stage`` names where it failed: a node kind, ``"tree_walk"``
    or ``"file_write"``.
    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class InvalidDocumentError(RenderingError):
    """A node lacks an attribute its kind requires.

    Parameters
    ----------
    node_kind : str
        Kind of the offending node (e.g. ``cmd``)
    attribute : str
        Name of the missing attribute
    location : str, optional
        Path from the root to the node, e.g. ``TeXML/env[document]/cmd``
    message : str, optional
        Overrides the generated message

    """

    def __init__(self, node_kind: str, attribute: str, location: str | None = None, message: str | None = None):
        if message is None:
            where = f" at {location}" if location else ""
            message = f"Invalid document: <{node_kind}> node{where} requires a non-empty '{attribute}' attribute"
        super().__init__(message, rendering_stage=node_kind)
        self.node_kind = node_kind
        self.attribute = attribute
        self.location = location


class OutputWriteError(RenderingError):
    """The rendered TeX could not be written to its destination."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(message or f"Could not write TeX to {file_path}", "file_write", original_error)
        self.file_path = file_path


__all__ = [
    "Texml2TexError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "ParsingError",
    "RenderingError",
    "InvalidDocumentError",
    "OutputWriteError",
]
