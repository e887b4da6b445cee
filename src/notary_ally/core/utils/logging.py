"""
loguru sinks for the CLI.

Library modules only do ``from loguru import logger``; the front end calls
``setup_logging`` once to decide where records go.
"""

import sys

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} | {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = CONSOLE_FORMAT,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> list[int]:
    """
    Replace loguru's sinks with stderr and, optionally, a rotating log file.

    Args:
        level: Minimum level for both sinks.
        log_file: File sink path; stderr only when None.
        fmt: Console format.
        rotation: Size at which the log file is rotated.
        retention: Age after which rotated files are deleted.

    Returns:
        The ids of the sinks that were added.
    """
    logger.remove()
    sink_ids = [logger.add(sys.stderr, level=level, format=fmt)]
    if log_file:
        file_sink = logger.add(
            log_file, level=level, format=FILE_FORMAT, rotation=rotation, retention=retention, encoding="utf-8"
        )
        sink_ids.append(file_sink)
    return sink_ids
