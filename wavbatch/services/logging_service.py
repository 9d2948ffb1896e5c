"""
This module sets up application logging and renders the run summary.

Console logging goes through loguru. The sink is configured once per process,
from the verbosity resolved out of the `--quiet`/`--debug` flags; the rest of the
package only ever imports `logger` and never touches the sinks.

The run summary is the resolved configuration written as YAML, the same
machine-readable format the converter uses for anything it reports in bulk.
"""
import sys
from typing import Optional, TextIO

import yaml
from loguru import logger

from ..config.common import LOGGER_FORMAT
from ..domain.options import RunConfiguration, Verbosity


def configure_logger(verbosity: Verbosity, sink: Optional[TextIO] = None) -> Optional[int]:
    """
    Replaces all loguru sinks with a single one matching `verbosity`.

    Args:
        verbosity: The resolved verbosity. `Verbosity.SILENT` leaves no sink at
                   all, so nothing is logged.
        sink: Where to write log records. Defaults to standard error.

    Returns:
        The loguru handler id of the new sink, or None when logging is silenced.
    """
    logger.remove()
    level = verbosity.log_level
    if level is None:
        return None
    return logger.add(sink or sys.stderr, level=level, format=LOGGER_FORMAT)


def format_run_summary(run_configuration: RunConfiguration) -> str:
    """Renders the run configuration as a YAML document."""
    return yaml.safe_dump(
        run_configuration.as_dict(), sort_keys=False, default_flow_style=False
    )
