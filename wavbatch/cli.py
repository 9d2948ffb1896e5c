"""
Command-Line Interface (CLI) setup for the WAV batch converter.

This module uses Python's `argparse` to define the command-line options and to
turn them into an `OptionSet`. Defaults come from three places, in increasing
order of precedence: the built-in constants in `wavbatch.config.audio`, the
optional user YAML file, and the command line itself.

`--quiet` and `--debug` are deliberately not declared as an argparse mutually
exclusive group: the conflict is detected when the option set is constructed,
so it surfaces as a `ConflictingFlagsException` like every other option error.
"""
import argparse
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .config.audio import DEFAULT_CODEC_IDENTIFIER, DEFAULT_COVER_FILENAME
from .config.common import USER_CONFIG_PATH, load_user_defaults
from .domain.codec import Codec
from .domain.options import OptionSet, Verbosity
from .services.logging_service import configure_logger


def build_parser(defaults: Optional[Dict[str, Any]] = None) -> argparse.ArgumentParser:
    """
    Creates the argument parser.

    Args:
        defaults: Option defaults overriding the built-in ones, typically loaded
                  from the user config file. Keys are option `dest` names.

    Returns:
        A configured `argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="wavbatch",
        description="Batch convert a folder of WAV files to another audio format.",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Silence all output.")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logs.")
    parser.add_argument(
        "-f", "--format", type=str, default=DEFAULT_CODEC_IDENTIFIER,
        help=f"Output format, one of: {', '.join(Codec.identifiers())} (default: %(default)s).",
    )
    parser.add_argument(
        "--cover", type=str, default=DEFAULT_COVER_FILENAME,
        help="Filename of the cover image to carry over (default: %(default)s).",
    )
    parser.add_argument(
        "-c", "--compression", type=int, default=None,
        help="Compression level, for formats that support one (FLAC: 0-8).",
    )
    parser.add_argument(
        "--sample-rate", type=int, default=None,
        help="Force the sample rate of converted files, in Hz.",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Resolve and report the configuration without converting anything.",
    )
    parser.add_argument(
        "--config", type=Path, default=USER_CONFIG_PATH,
        help="YAML file with default option values (default: %(default)s).",
    )
    parser.add_argument("src", type=Path, help="Input folder containing the WAV files to convert.")
    parser.add_argument("dest", type=Path, help="Output folder for the converted files.")

    if defaults:
        parser.set_defaults(**defaults)
    return parser


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments, applying the user config file defaults.

    A first pass reads `--config` and the verbosity flags. The logger is set up
    from those flags before the config file is loaded, so `--quiet` also silences
    warnings about the file and `--debug` shows how it was read.

    Args:
        argv: The argument list, without the program name. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed arguments.
    """
    bootstrap_parser = argparse.ArgumentParser(add_help=False)
    bootstrap_parser.add_argument("--config", type=Path, default=USER_CONFIG_PATH)
    bootstrap_parser.add_argument("-q", "--quiet", action="store_true")
    bootstrap_parser.add_argument("-d", "--debug", action="store_true")
    bootstrap_args, _ = bootstrap_parser.parse_known_args(argv)

    configure_logger(Verbosity.from_flags(bootstrap_args.quiet, bootstrap_args.debug))
    defaults = load_user_defaults(bootstrap_args.config)
    return build_parser(defaults).parse_args(argv)


def parse_options(argv: Optional[Sequence[str]] = None) -> OptionSet:
    """
    Parses the command line into an `OptionSet`.

    Raises:
        UnknownFormatException: If `--format` names no known codec.
        ConflictingFlagsException: If both `--quiet` and `--debug` are given.
    """
    return OptionSet.from_namespace(get_args(argv))
