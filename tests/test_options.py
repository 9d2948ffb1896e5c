"""
Unit tests for the option models.
"""
import dataclasses
from argparse import Namespace
from pathlib import Path

import pytest

from wavbatch.config.audio import DEFAULT_COVER_FILENAME
from wavbatch.domain.codec import Codec
from wavbatch.domain.exceptions import ConflictingFlagsException, UnknownFormatException
from wavbatch.domain.options import EncodingOptions, OptionSet, RunConfiguration, Verbosity


class TestOptionSet:
    """Tests for OptionSet construction."""

    def test_defaults(self):
        """Omitted options take their declared defaults."""
        options = OptionSet(src=Path("in"), dest=Path("out"))
        assert options.codec is Codec.FLAC
        assert options.cover == DEFAULT_COVER_FILENAME
        assert options.compression is None
        assert options.sample_rate is None
        assert not options.quiet
        assert not options.debug
        assert not options.dry_run

    def test_quiet_and_debug_conflict(self):
        """quiet together with debug is rejected at construction."""
        with pytest.raises(ConflictingFlagsException):
            OptionSet(src=Path("in"), dest=Path("out"), quiet=True, debug=True)

    def test_conflict_raised_without_touching_filesystem(self, tmp_path):
        """The conflict is detected even when the source does not exist."""
        with pytest.raises(ConflictingFlagsException):
            OptionSet(src=tmp_path / "missing", dest=tmp_path, quiet=True, debug=True)

    def test_is_immutable(self):
        options = OptionSet(src=Path("in"), dest=Path("out"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.compression = 3

    @pytest.mark.parametrize(
        "quiet,debug,expected",
        [(True, False, Verbosity.SILENT), (False, True, Verbosity.DEBUG), (False, False, Verbosity.NORMAL)],
    )
    def test_verbosity(self, quiet, debug, expected):
        options = OptionSet(src=Path("in"), dest=Path("out"), quiet=quiet, debug=debug)
        assert options.verbosity is expected


class TestFromNamespace:
    """Tests for OptionSet.from_namespace."""

    def _namespace(self, **overrides):
        values = dict(
            src="in", dest="out", quiet=False, debug=False, format="flac",
            cover="cover.jpg", compression=None, sample_rate=None, dry_run=False,
        )
        values.update(overrides)
        return Namespace(**values)

    def test_converts_values(self):
        options = OptionSet.from_namespace(
            self._namespace(format="mp3", compression=2, sample_rate=48000, dry_run=True)
        )
        assert options.codec is Codec.MP3
        assert options.src == Path("in")
        assert options.dest == Path("out")
        assert options.compression == 2
        assert options.sample_rate == 48000
        assert options.dry_run

    def test_unknown_format(self):
        with pytest.raises(UnknownFormatException):
            OptionSet.from_namespace(self._namespace(format="aiff"))

    def test_conflicting_flags(self):
        with pytest.raises(ConflictingFlagsException):
            OptionSet.from_namespace(self._namespace(quiet=True, debug=True))

    def test_missing_attributes_use_defaults(self):
        options = OptionSet.from_namespace(Namespace(src="in", dest="out"))
        assert options.codec is Codec.FLAC
        assert options.cover == DEFAULT_COVER_FILENAME


class TestVerbosity:
    """Tests for Verbosity."""

    def test_quiet_wins_over_debug(self):
        """The nominal debug flag does not matter once quiet is set."""
        assert Verbosity.from_flags(quiet=True, debug=True) is Verbosity.SILENT

    def test_ordering(self):
        assert Verbosity.SILENT < Verbosity.NORMAL < Verbosity.DEBUG

    def test_log_levels(self):
        assert Verbosity.SILENT.log_level is None
        assert Verbosity.NORMAL.log_level == "INFO"
        assert Verbosity.DEBUG.log_level == "DEBUG"


class TestRunConfiguration:
    """Tests for RunConfiguration.as_dict."""

    def test_as_dict(self):
        config = RunConfiguration(
            src=Path("in"),
            dest=Path("out"),
            dry_run=True,
            cover="folder.jpg",
            verbosity=Verbosity.NORMAL,
            encoding=EncodingOptions(format=Codec.FLAC, compression=5, sample_rate=None),
        )
        assert config.as_dict() == {
            "src": "in",
            "dest": "out",
            "dry_run": True,
            "cover": "folder.jpg",
            "verbosity": "normal",
            "encoding": {"format": "flac", "compression": 5, "sample_rate": None},
        }


class TestCoverFromNamespace:
    """Tests for the cover filename taken from parsed arguments."""

    def test_empty_cover_is_kept(self):
        """An explicit empty value is not replaced by the default."""
        options = OptionSet.from_namespace(Namespace(src="in", dest="out", cover=""))
        assert options.cover == ""

    def test_none_cover_uses_default(self):
        options = OptionSet.from_namespace(Namespace(src="in", dest="out", cover=None))
        assert options.cover == DEFAULT_COVER_FILENAME
