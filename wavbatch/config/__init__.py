"""
Configuration Package for the WAV batch converter.

This package centralizes the static configuration settings of the application.
Keeping the constants apart from the logic makes it easy to adjust defaults
without touching the code that validates and resolves options.

This package includes settings for:
- Audio defaults: the baseline output codec, the cover-image filename and the
  FLAC compression knob.
- Common application settings like the logging format, exit statuses and the
  optional user defaults file (`config.user.yaml`).
"""
