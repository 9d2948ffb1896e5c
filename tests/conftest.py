"""
Pytest configuration and shared fixtures for the wavbatch tests.
"""
import sys
from pathlib import Path

import pytest
from loguru import logger

# Add the project root to the Python path so `main` is importable.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def log_records():
    """Collect loguru records (level name and message) emitted during a test."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    try:
        logger.remove(handler_id)
    except ValueError:
        # Already removed by a test that reconfigured the logger.
        pass


@pytest.fixture
def source_dir(tmp_path):
    """An existing source directory holding one WAV file."""
    directory = tmp_path / "src"
    directory.mkdir()
    (directory / "track01.wav").write_bytes(b"RIFF")
    return directory


@pytest.fixture
def dest_dir(tmp_path):
    """A destination path that does not exist yet."""
    return tmp_path / "out"


@pytest.fixture
def regular_file(tmp_path):
    """A path to a regular file, not a directory."""
    path = tmp_path / "not_a_dir.wav"
    path.write_bytes(b"RIFF")
    return path
