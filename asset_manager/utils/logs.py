import logging
import sys
from pathlib import Path
from typing import Optional

import structlog


def configure_logging(log_file: Optional[Path] = None, debug: bool = False) -> None:
    """Route structlog events through stdlib logging, to `log_file` or stderr.

    Events are rendered as ``key=value`` pairs, prefixed with a timestamp and
    the log level.
    """
    level = logging.DEBUG if debug else logging.INFO
    if log_file:
        Path(log_file).parent.mkdir(exist_ok=True, parents=True)
        logging.basicConfig(filename=str(log_file), filemode="a+", level=level, format="%(message)s")
    else:
        logging.basicConfig(stream=sys.stderr, level=level, format="%(message)s")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "logger", "event"]
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
