"""
Data models for the user's options and the configuration derived from them.

The models follow the order in which a run uses them:

1. `OptionSet` holds the raw user intent, built once from the command line.
   Constructing it already rejects the one contradiction that can be seen
   without touching the filesystem: `--quiet` together with `--debug`.
2. `EncodingOptions` is the codec-aware encoding configuration resolved from a
   validated option set.
3. `RunConfiguration` bundles everything the conversion pipeline receives.

All three are frozen dataclasses, so nothing downstream can change a value
after it has been checked.
"""
from argparse import Namespace
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.audio import DEFAULT_COVER_FILENAME
from .codec import Codec
from .exceptions import ConflictingFlagsException


class Verbosity(IntEnum):
    """Logging thresholds, ordered from least to most output."""

    SILENT = 0
    NORMAL = 1
    DEBUG = 2

    @property
    def log_level(self) -> Optional[str]:
        """The loguru level name for this verbosity, or None when nothing should be logged."""
        return _LOG_LEVELS[self]

    @classmethod
    def from_flags(cls, quiet: bool, debug: bool) -> "Verbosity":
        # quiet takes precedence over debug, debug over the default.
        if quiet:
            return cls.SILENT
        if debug:
            return cls.DEBUG
        return cls.NORMAL


_LOG_LEVELS = {
    Verbosity.SILENT: None,
    Verbosity.NORMAL: "INFO",
    Verbosity.DEBUG: "DEBUG",
}


@dataclass(frozen=True)
class OptionSet:
    """
    The options requested by the user for one run.

    Attributes:
        src (Path): Directory containing the WAV files to convert.
        dest (Path): Directory receiving the converted files.
        quiet (bool): Silence all output.
        debug (bool): Enable debug logs. Cannot be combined with `quiet`.
        codec (Codec): The output format.
        cover (str): Filename of the cover image looked up next to the sources.
        compression (Optional[int]): Requested compression level, or None for the
                                     codec's default.
        sample_rate (Optional[int]): Forced output sample rate in Hz, or None to keep
                                     the source rate.
        dry_run (bool): Resolve the configuration without converting anything.

    Raises:
        ConflictingFlagsException: If both `quiet` and `debug` are set.
    """

    src: Path
    dest: Path
    quiet: bool = False
    debug: bool = False
    codec: Codec = Codec.FLAC
    cover: str = DEFAULT_COVER_FILENAME
    compression: Optional[int] = None
    sample_rate: Optional[int] = None
    dry_run: bool = False

    def __post_init__(self):
        if self.quiet and self.debug:
            raise ConflictingFlagsException("quiet", "debug")

    @property
    def verbosity(self) -> Verbosity:
        return Verbosity.from_flags(self.quiet, self.debug)

    @classmethod
    def from_namespace(cls, args: Namespace) -> "OptionSet":
        """
        Builds an option set from parsed command-line arguments.

        The codec identifier is resolved through the codec registry here, so an
        unknown `--format` value fails before any validation starts.

        Args:
            args: The namespace returned by the argument parser. Missing
                  attributes fall back to the option set defaults.

        Returns:
            A new `OptionSet`.

        Raises:
            UnknownFormatException: If `args.format` names no known codec.
            ConflictingFlagsException: If both `args.quiet` and `args.debug` are set.
        """
        format_value = getattr(args, "format", None)
        codec = Codec.from_identifier(format_value) if format_value is not None else Codec.FLAC
        cover = getattr(args, "cover", None)
        return cls(
            src=Path(args.src),
            dest=Path(args.dest),
            quiet=bool(getattr(args, "quiet", False)),
            debug=bool(getattr(args, "debug", False)),
            codec=codec,
            cover=DEFAULT_COVER_FILENAME if cover is None else cover,
            compression=getattr(args, "compression", None),
            sample_rate=getattr(args, "sample_rate", None),
            dry_run=bool(getattr(args, "dry_run", False)),
        )


@dataclass(frozen=True)
class EncodingOptions:
    """
    The resolved, codec-aware encoding configuration.

    `compression` is always a concrete, valid level when the codec supports a
    compression setting. For every other codec it is None: there is no level for
    the encoder to apply.
    """

    format: Codec
    compression: Optional[int]
    sample_rate: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "format": self.format.identifier,
            "compression": self.compression,
            "sample_rate": self.sample_rate,
        }


@dataclass(frozen=True)
class RunConfiguration:
    """Everything the conversion pipeline needs for one run."""

    src: Path
    dest: Path
    dry_run: bool
    cover: str
    verbosity: Verbosity
    encoding: EncodingOptions

    def as_dict(self) -> Dict[str, Any]:
        return {
            "src": str(self.src),
            "dest": str(self.dest),
            "dry_run": self.dry_run,
            "cover": self.cover,
            "verbosity": self.verbosity.name.lower(),
            "encoding": self.encoding.as_dict(),
        }
