"""
This file marks the 'wavbatch' directory as a Python package.

The package holds the configuration-resolution layer of the WAV batch converter.
It turns command-line input into a validated, immutable `RunConfiguration` that
the conversion pipeline consumes. The most commonly needed names are re-exported
here so callers can write `from wavbatch import Codec` instead of reaching into
the submodules.
"""

from .domain.codec import Codec
from .domain.options import EncodingOptions, OptionSet, RunConfiguration, Verbosity

__all__ = [
    "Codec",
    "EncodingOptions",
    "OptionSet",
    "RunConfiguration",
    "Verbosity",
]
