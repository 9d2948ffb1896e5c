"""
This module contains helper functions for formatting option values into
human-readable strings for log messages.
"""

from typing import Optional

from ..domain.options import EncodingOptions


def format_sample_rate(sample_rate: Optional[int]) -> str:
    """
    Formats a sample rate in Hz as kilohertz.

    Args:
        sample_rate: The rate in Hz, or None when the source rate is kept.

    Returns:
        A string such as "44.1 kHz" or "48 kHz", or "source rate" for None.
    """
    if sample_rate is None:
        return "source rate"
    # 'g' drops the decimal part for whole kilohertz values (48000 -> "48 kHz").
    return f"{sample_rate / 1000:g} kHz"


def describe_encoding(encoding: EncodingOptions) -> str:
    """
    Builds a one-line description of the encoding options.

    For example: "FLAC, compression 5, 48 kHz" or "MP3, source rate".
    """
    parts = [encoding.format.display_name]
    if encoding.compression is not None:
        parts.append(f"compression {encoding.compression}")
    parts.append(format_sample_rate(encoding.sample_rate))
    return ", ".join(parts)
