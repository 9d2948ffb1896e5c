"""
Configuration settings related to audio output.

This module defines the defaults applied when the user leaves an option out,
along with the fixed numeric properties of the supported output codecs. The
codec registry in `wavbatch.domain.codec` is built from these values.
"""

# ======================================================================================
# Option Defaults
# ======================================================================================

# The codec used when `--format` is not given. FLAC is the baseline format:
# lossless, widely supported and the only codec with a configurable compression level.
DEFAULT_CODEC_IDENTIFIER = "flac"

# The cover image the pipeline copies next to the converted files when present.
DEFAULT_COVER_FILENAME = "cover.jpg"


# ======================================================================================
# FLAC Compression
# ======================================================================================

# Valid FLAC compression levels, from 0 (fastest) to 8 (smallest output).
FLAC_COMPRESSION_RANGE = range(0, 9)

# The reference encoder's own default level, a good balance of speed and size.
DEFAULT_FLAC_COMPRESSION = 5
