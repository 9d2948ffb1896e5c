"""
Services Package for the WAV batch converter.

This package holds the service layer: the functions that act on the domain
models to turn raw options into a configuration the pipeline can trust.

- **Validation Service (`validate`):**
  Checks an `OptionSet` against the filesystem and the codec registry and
  raises a `ValidationException` on the first problem found.

- **Resolver Service (`resolve`, `resolve_verbosity`, `build_run_configuration`):**
  Derives the immutable `EncodingOptions` and the `RunConfiguration` handed to
  the conversion pipeline.

- **Logging Service (`configure_logger`, `format_run_summary`):**
  Sets up the process-wide loguru sink from the resolved verbosity and renders
  the resolved configuration as YAML.
"""
from .logging_service import configure_logger, format_run_summary
from .resolver_service import build_run_configuration, resolve, resolve_verbosity
from .validation_service import validate

__all__ = [
    "build_run_configuration",
    "configure_logger",
    "format_run_summary",
    "resolve",
    "resolve_verbosity",
    "validate",
]
