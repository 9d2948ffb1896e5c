"""
Utilities Package for the WAV batch converter.

Modules:
    - format_utils.py: Helper functions that turn option values, such as sample
      rates and encoding settings, into human-readable strings for log messages.
"""
