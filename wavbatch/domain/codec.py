"""
The codec registry: the closed set of output formats the converter can produce.

Each `Codec` member carries the fixed properties of its format. Adding a format
means adding a member here; nothing else in the configuration layer enumerates
codecs on its own.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..config.audio import DEFAULT_FLAC_COMPRESSION, FLAC_COMPRESSION_RANGE
from .exceptions import UnknownFormatException


@dataclass(frozen=True)
class CodecProperties:
    """Fixed properties of one output codec."""

    identifier: str
    display_name: str
    extension: str
    compression_range: Optional[range] = None
    default_compression: Optional[int] = None


class Codec(Enum):
    """
    A supported output audio format.

    Only FLAC exposes a compression level; the other formats are either
    uncompressed, have a single lossless mode, or are tuned through bitrate
    rather than an effort knob.
    """

    FLAC = CodecProperties(
        identifier="flac",
        display_name="FLAC",
        extension=".flac",
        compression_range=FLAC_COMPRESSION_RANGE,
        default_compression=DEFAULT_FLAC_COMPRESSION,
    )
    ALAC = CodecProperties(identifier="alac", display_name="Apple Lossless (ALAC)", extension=".m4a")
    WAV = CodecProperties(identifier="wav", display_name="PCM WAV", extension=".wav")
    MP3 = CodecProperties(identifier="mp3", display_name="MP3", extension=".mp3")

    @property
    def identifier(self) -> str:
        return self.value.identifier

    @property
    def display_name(self) -> str:
        return self.value.display_name

    @property
    def extension(self) -> str:
        return self.value.extension

    @property
    def compression_range(self) -> Optional[range]:
        return self.value.compression_range

    @property
    def default_compression(self) -> Optional[int]:
        return self.value.default_compression

    @property
    def supports_compression(self) -> bool:
        return self.value.compression_range is not None

    def accepts_compression(self, level: int) -> bool:
        """Returns True if `level` is a valid compression level for this codec."""
        return self.supports_compression and level in self.compression_range

    @classmethod
    def identifiers(cls) -> List[str]:
        return [codec.identifier for codec in cls]

    @classmethod
    def from_identifier(cls, value: str) -> "Codec":
        """
        Looks up a codec by its identifier string.

        The comparison ignores case and surrounding whitespace, so "FLAC" and
        " flac " both resolve to `Codec.FLAC`.

        Args:
            value: The identifier supplied by the user (e.g. "flac", "mp3").

        Returns:
            The matching `Codec` member.

        Raises:
            UnknownFormatException: If no codec has this identifier.
        """
        normalized = str(value).strip().lower()
        for codec in cls:
            if codec.identifier == normalized:
                return codec
        raise UnknownFormatException(value, supported=tuple(cls.identifiers()))

    def __str__(self) -> str:
        return self.identifier
