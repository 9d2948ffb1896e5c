"""
Main entry point for the WAV batch converter.

This script parses the command-line arguments, validates them and resolves the
immutable `RunConfiguration` that the conversion pipeline works from. Any option
error stops the run here, before a single file is touched.
"""

import sys
from typing import Callable, Optional, Sequence

from loguru import logger

from wavbatch.cli import parse_options
from wavbatch.config.common import EXIT_FAILURE, EXIT_SUCCESS, LOGGER_FORMAT
from wavbatch.domain.exceptions import WavBatchException
from wavbatch.domain.options import RunConfiguration
from wavbatch.services.logging_service import configure_logger, format_run_summary
from wavbatch.services.resolver_service import build_run_configuration
from wavbatch.utils.format_utils import describe_encoding

# Configure the logger for initial setup (e.g. warnings about the user config file).
# The level is replaced once the verbosity flags have been resolved.
logger.remove()
logger.add(sys.stderr, level="INFO", format=LOGGER_FORMAT)

ConversionPipeline = Callable[[RunConfiguration], None]


def main(
    argv: Optional[Sequence[str]] = None,
    pipeline: Optional[ConversionPipeline] = None,
) -> int:
    """
    Runs the configuration stage and hands the result to the conversion pipeline.

    This function performs the following steps:
    1. Parses the command-line arguments into an `OptionSet`.
    2. Configures the global logger from the resolved verbosity.
    3. Validates the options and resolves the `RunConfiguration`.
    4. Reports the configuration, then calls `pipeline` with it unless this is
       a dry run.

    Args:
        argv: The argument list, without the program name. Defaults to `sys.argv[1:]`.
        pipeline: Callable performing the actual conversion. When None, the run
                  stops after reporting the resolved configuration.

    Returns:
        The process exit status: `EXIT_SUCCESS`, or `EXIT_FAILURE` if the options
        were rejected.
    """
    try:
        options = parse_options(argv)
        configure_logger(options.verbosity)
        run_configuration = build_run_configuration(options)
    except WavBatchException as e:
        # Printed directly so the message is shown even with --quiet.
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info(
        f"Converting '{run_configuration.src}' to '{run_configuration.dest}' "
        f"({describe_encoding(run_configuration.encoding)})"
    )

    if run_configuration.dry_run:
        logger.info("Dry run enabled, no files will be converted.")
        logger.info(f"Resolved configuration:\n{format_run_summary(run_configuration)}")
        return EXIT_SUCCESS

    if pipeline is None:
        logger.debug(f"Resolved configuration:\n{format_run_summary(run_configuration)}")
        logger.warning("No conversion pipeline is configured; stopping after option resolution.")
        return EXIT_SUCCESS

    pipeline(run_configuration)
    logger.success("Conversion finished.")
    return EXIT_SUCCESS


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
