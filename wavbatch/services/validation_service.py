"""
Validation of a constructed option set.

The checks run in a fixed order and stop at the first failure, which is raised
as a `ValidationException` subclass. On success the very same `OptionSet` is
returned; validation never rewrites a value.

A compression level given for a codec that has no compression setting is not a
failure. The level is simply ignored and a debug diagnostic records it.
"""
from pathlib import Path

from loguru import logger

from ..domain.exceptions import (
    InvalidCompressionLevelException,
    InvalidSampleRateException,
    NotADirectoryException,
)
from ..domain.options import OptionSet


def validate_directory(directory: Path) -> None:
    """
    Checks that `directory` exists and is a directory.

    Raises:
        NotADirectoryException: If the path is missing or points to something else.
    """
    if not directory.is_dir():
        raise NotADirectoryException(directory)


def validate(options: OptionSet) -> OptionSet:
    """
    Validates an option set against the filesystem and the codec registry.

    Checks, in order:
    1. The source path is an existing directory.
    2. A compression level for a codec without compression support is logged as
       ignored (never an error).
    3. A compression level for a codec with compression support is within the
       codec's range.
    4. A sample-rate override is a positive number.

    The destination directory is not checked here; the conversion pipeline owns it.

    Args:
        options: The option set built from the command line.

    Returns:
        The same `options` object, now known to be valid.

    Raises:
        NotADirectoryException: If the source path is not a directory.
        InvalidCompressionLevelException: If the compression level is out of range.
        InvalidSampleRateException: If the sample rate is zero or negative.
    """
    validate_directory(options.src)

    codec = options.codec
    if options.compression is not None:
        if not codec.supports_compression:
            logger.debug(
                f"Ignoring compression level ({options.compression}): "
                f"not supported by {codec.display_name}"
            )
        elif not codec.accepts_compression(options.compression):
            raise InvalidCompressionLevelException(options.compression, codec)

    if options.sample_rate is not None and options.sample_rate <= 0:
        raise InvalidSampleRateException(options.sample_rate)

    logger.debug(f"Options validated: source '{options.src}', format {codec.display_name}")
    return options
