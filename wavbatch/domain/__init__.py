"""
This package contains the core domain models of the WAV batch converter.

The domain layer describes what a conversion run is configured with, independent
of the command-line interface that collects the values and of the pipeline that
eventually consumes them.

Modules:
    exceptions.py: Custom exception types for every way option parsing or
                   validation can fail.
    codec.py: The `Codec` registry, the closed set of output formats and their
              fixed properties (display name, compression support and default).
    options.py: `OptionSet` (raw user intent), `EncodingOptions` (the resolved
                encoding configuration), `Verbosity` and `RunConfiguration`.
"""
