"""structlog configuration.

Log events go through the stdlib root logger, so third-party libraries
(SQLAlchemy) share the same handler and renderer.
"""

import logging
import sys

import structlog

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
]


def setup_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Configure structlog and the root logger.

    Calling it again replaces the previous handler, so the handler always
    writes to the current ``sys.stderr``.

    Args:
        level: Name of the stdlib logging level
        json_output: Render JSON lines instead of console text
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: '{level}'")

    structlog.configure(
        processors=SHARED_PROCESSORS
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    if json_output:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    # SQLAlchemy echoes every statement at INFO
    logging.getLogger("sqlalchemy").setLevel(max(log_level, logging.WARNING))


def bind_context(**kwargs) -> None:
    """Attach key/value pairs to every event logged in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)
