"""
Defines custom exception types for the WAV batch converter.

Every failure of option parsing or validation is fatal to the run: it is reported
to the user as a single message and the process stops before any file is touched.
Distinct exception types let the entry point and the tests tell the failure kinds
apart, and each one keeps the offending values as attributes.

All custom exceptions inherit from the base `WavBatchException`.
"""
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .codec import Codec


class WavBatchException(Exception):
    """Base class for all custom exceptions in the WAV batch converter."""

    pass


# --- Option Set Construction Exceptions ---
class OptionsException(WavBatchException):
    """Base class for exceptions raised while building the option set from user input."""

    pass


class ConflictingFlagsException(OptionsException):
    """
    Raised when mutually exclusive verbosity flags are both requested.

    `--quiet` silences all output while `--debug` asks for more of it, so a
    run cannot honour both.
    """

    def __init__(self, first: str = "quiet", second: str = "debug"):
        self.first = first
        self.second = second
        super().__init__(f"The '--{first}' and '--{second}' flags cannot be used together.")


class UnknownFormatException(OptionsException):
    """
    Raised when a codec identifier does not match any entry of the codec registry.

    Attributes:
        value (str): The identifier as the user typed it.
        supported (tuple[str, ...]): The identifiers the registry does know.
    """

    def __init__(self, value: str, supported: tuple = ()):
        self.value = value
        self.supported = tuple(supported)
        message = f"Unknown output format '{value}'."
        if self.supported:
            message += f" Supported formats: {', '.join(self.supported)}."
        super().__init__(message)


# --- Validation Exceptions ---
class ValidationException(WavBatchException):
    """Base class for exceptions raised while validating a constructed option set."""

    pass


class NotADirectoryException(ValidationException):
    """
    Raised when the source path does not exist or is not a directory.

    The destination path is not subject to this check; creating it is left to the
    conversion pipeline.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"'{path}' is not a directory.")


class InvalidCompressionLevelException(ValidationException):
    """Raised when a compression level falls outside the range accepted by the chosen codec."""

    def __init__(self, value: int, codec: "Codec"):
        self.value = value
        self.codec = codec
        level_range = codec.compression_range
        super().__init__(
            f"Compression level {value} is not valid for {codec.display_name} "
            f"(expected {level_range.start} to {level_range.stop - 1})."
        )


class InvalidSampleRateException(ValidationException):
    """Raised when the sample-rate override is not a positive number of hertz."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Sample rate must be a positive number of Hz, got {value}.")
