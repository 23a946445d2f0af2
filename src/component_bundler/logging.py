"""Logging for the bundler: short console lines on stderr, JSON records in production."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def configure_logging(level: str, json_output: bool | None = None) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).
        json_output: Force JSON output. If None, auto-detect (JSON in prod).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_output is None:
        from component_bundler.config import get_settings

        json_output = get_settings().app_env == "prod"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    renderer: structlog.types.Processor
    if json_output:
        # Build servers collect these; keep timestamps and structured tracebacks.
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))
        final_processors: list[structlog.types.Processor] = [
            structlog.processors.dict_tracebacks
        ]
        renderer = structlog.processors.JSONRenderer()
    else:
        final_processors = []
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *final_processors,
            renderer,
        ],
    )

    # stdout is reserved for CLI output.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


@contextmanager
def build_context(component: str, cwd: str, **extra: object) -> Iterator[None]:
    """Tag every log line emitted during one component build."""
    with structlog.contextvars.bound_contextvars(component=component, cwd=cwd, **extra):
        yield
