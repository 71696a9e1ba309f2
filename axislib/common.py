"""axislib.common.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Common methods
Author: Will Bickerstaff
Version: 0.1
"""

import logging
from typing import Optional
from axislib.config import ConfigLoader


def init_log(log_level: Optional[str] = None, force: bool = False) -> None:
    """Initialize the logging configuration.

    If `log_level` is not provided it is taken from the configuration file,
    an unknown level name falls back to 'INFO' with a warning. Output goes
    to `ConfigLoader().log_file`.

    Logging is only set up if no handlers are configured yet, so an existing
    configuration (e.g. from a test runner) is kept, unless `force` is set.
    Module level logging calls made before this point install a default
    handler, `force` replaces it.

    Args:
        log_level (Optional[str]): Desired logging level as a string (e.g.,
                                   'DEBUG', 'INFO').
        force (bool): Replace any existing root handlers.
    """
    if logging.getLogger().hasHandlers() and not force:
        return
    log_level = log_level or ConfigLoader().log_level
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        filename=ConfigLoader().log_file,
        force=force
    )
    if level == logging.INFO and log_level.upper() != "INFO":
        logging.warning("Invalid log level '%s' provided, defaulting "
                        "to INFO.", log_level)

    logging.info("Logging initialized with level %s.",
                 logging.getLevelName(level))


def format_decimal(value: float, places: int) -> str:
    """Format decimal degrees with a fixed number of places."""
    return f"{value:.{places}f}"
