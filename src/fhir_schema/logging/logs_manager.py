import logging
from collections.abc import Callable, Sequence
from contextvars import ContextVar
from functools import wraps
from os import PathLike
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from fhir_schema.config.config import LOG_LEVEL

source_context_var: ContextVar[str | None] = ContextVar("source", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(module)s.py:%(funcName)s():%(lineno)d %(message)s"


def add_source_to_logger() -> Callable:
    """Tag every log record emitted during the call with the file or label being decoded.

    The wrapped function must take the source (a path or a label) as its first argument.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(source: str | PathLike[str], *args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            token = source_context_var.set(str(source))
            try:
                return func(source, *args, **kwargs)
            finally:
                source_context_var.reset(token)

        return wrapper

    return decorator


class EnrichedJsonFormatter(JsonFormatter):
    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        log_record["source"] = source_context_var.get() or "-"
        super().add_fields(log_record, record, message_dict)


def init_logging(quieten: Sequence[str] = ("asyncio",), level: int = LOG_LEVEL) -> None:
    formatter = EnrichedJsonFormatter(LOG_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logging.root.handlers = []  # Remove default handlers
    logging.root.setLevel(level)
    logging.root.addHandler(handler)

    for q in quieten:
        logging.getLogger(q).setLevel(logging.WARNING)
