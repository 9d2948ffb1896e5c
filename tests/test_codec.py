"""
Unit tests for the codec registry.
"""
import pytest

from wavbatch.config.audio import DEFAULT_FLAC_COMPRESSION
from wavbatch.domain.codec import Codec
from wavbatch.domain.exceptions import UnknownFormatException


class TestFromIdentifier:
    """Tests for Codec.from_identifier."""

    @pytest.mark.parametrize(
        "value,expected",
        [("flac", Codec.FLAC), ("alac", Codec.ALAC), ("wav", Codec.WAV), ("mp3", Codec.MP3)],
    )
    def test_known_identifiers(self, value, expected):
        """Each identifier maps to its codec."""
        assert Codec.from_identifier(value) is expected

    def test_ignores_case_and_whitespace(self):
        """Lookup is case-insensitive and strips whitespace."""
        assert Codec.from_identifier("  FLAC ") is Codec.FLAC

    @pytest.mark.parametrize("value", ["ogg", "", "flacc", "mp 3"])
    def test_unknown_identifier_raises(self, value):
        """Identifiers outside the registry raise UnknownFormatException."""
        with pytest.raises(UnknownFormatException) as exc_info:
            Codec.from_identifier(value)
        assert exc_info.value.value == value

    def test_unknown_identifier_lists_supported(self):
        """The error message names the supported formats."""
        with pytest.raises(UnknownFormatException) as exc_info:
            Codec.from_identifier("ogg")
        assert exc_info.value.supported == ("flac", "alac", "wav", "mp3")
        assert "flac, alac, wav, mp3" in str(exc_info.value)


class TestCodecProperties:
    """Tests for the fixed per-codec properties."""

    def test_only_flac_supports_compression(self):
        """FLAC is the only codec with a configurable compression level."""
        assert [c for c in Codec if c.supports_compression] == [Codec.FLAC]

    def test_default_compression_present_only_for_capable_codecs(self):
        """Capable codecs carry exactly one default, the others none."""
        for codec in Codec:
            if codec.supports_compression:
                assert codec.default_compression in codec.compression_range
            else:
                assert codec.default_compression is None

    def test_flac_default_compression(self):
        assert Codec.FLAC.default_compression == DEFAULT_FLAC_COMPRESSION

    def test_accepts_compression_range(self):
        """FLAC accepts 0 through 8."""
        assert Codec.FLAC.accepts_compression(0)
        assert Codec.FLAC.accepts_compression(8)
        assert not Codec.FLAC.accepts_compression(9)
        assert not Codec.FLAC.accepts_compression(-1)

    def test_non_capable_codec_accepts_no_level(self):
        assert not Codec.MP3.accepts_compression(5)

    def test_display_names(self):
        assert Codec.FLAC.display_name == "FLAC"
        assert Codec.MP3.display_name == "MP3"

    def test_extensions_start_with_dot(self):
        assert all(codec.extension.startswith(".") for codec in Codec)

    def test_str_is_identifier(self):
        assert str(Codec.ALAC) == "alac"
