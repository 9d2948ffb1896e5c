"""
Derives the final configuration handed to the conversion pipeline.

Every decision that can fail has already been made by the validator, so the
functions here are pure and never raise for a validated option set.
"""
from loguru import logger

from ..domain.options import EncodingOptions, OptionSet, RunConfiguration, Verbosity
from .validation_service import validate


def resolve_verbosity(quiet: bool, debug: bool) -> Verbosity:
    """Maps the verbosity flags to a level: quiet wins over debug, debug over normal."""
    return Verbosity.from_flags(quiet, debug)


def resolve(options: OptionSet) -> EncodingOptions:
    """
    Resolves the encoding options of a validated option set.

    The user's compression level is used when given, otherwise the codec's
    default. Codecs without a compression setting resolve to `compression=None`,
    whatever the user asked for, so the pipeline has no level to misapply.

    Args:
        options: An option set that has passed `validate`.

    Returns:
        The immutable `EncodingOptions` for the run.
    """
    codec = options.codec
    if codec.supports_compression:
        compression = (
            options.compression if options.compression is not None else codec.default_compression
        )
    else:
        compression = None

    return EncodingOptions(
        format=codec,
        compression=compression,
        sample_rate=options.sample_rate,
    )


def build_run_configuration(options: OptionSet) -> RunConfiguration:
    """
    Validates `options` and resolves them into a `RunConfiguration`.

    Raises:
        ValidationException: Any failure raised by `validate`.
    """
    validated = validate(options)
    encoding = resolve(validated)
    logger.debug(
        f"Resolved encoding options: format={encoding.format.identifier}, "
        f"compression={encoding.compression}, sample_rate={encoding.sample_rate}"
    )
    return RunConfiguration(
        src=validated.src,
        dest=validated.dest,
        dry_run=validated.dry_run,
        cover=validated.cover,
        verbosity=resolve_verbosity(validated.quiet, validated.debug),
        encoding=encoding,
    )
