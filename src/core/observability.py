"""Observability helpers for the LoLdle bot.

This module provides structured logging (structlog over stdlib logging),
correlation ids for per-command tracing and the ``debug_wrapper`` decorator
used on adapter calls.
"""

import asyncio
import functools
import json
import logging
import re
import sys
import time
import traceback
from collections.abc import Callable
from typing import Any, TypeVar, cast

import structlog
from pydantic import BaseModel
from structlog.contextvars import bind_contextvars, unbind_contextvars

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        *_SHARED_PROCESSORS,
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),  # type: ignore[list-item]
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

# Get logger instance
logger = structlog.get_logger()

# Type variable for generic decorator
F = TypeVar("F", bound=Callable[..., Any])

# Sensitive data redaction pattern
_SENSITIVE_KEY_RE = re.compile(r"(token|key|secret|password|authorization|auth)", re.IGNORECASE)


def configure_stdlib_json_logging(level: str = "INFO", file_target: str | None = None) -> None:
    """Route stdlib ``logging`` records through structlog's renderer.

    Args:
        level: Root log level name
        file_target: Optional log file path in addition to stdout
    """
    renderer: Any = (
        structlog.dev.ConsoleRenderer()
        if sys.stdout.isatty()
        else structlog.processors.JSONRenderer()
    )
    # structlog loggers hand their event dict to the stdlib formatter below
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if file_target:
        handlers.append(logging.FileHandler(file_target, encoding="utf-8"))

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level.upper())


def set_correlation_id(correlation_id: str) -> None:
    """Bind a correlation id to every log line emitted in this context."""
    bind_contextvars(correlation_id=correlation_id)


def clear_correlation_id() -> None:
    unbind_contextvars("correlation_id")


def _mask_scalar(value: Any) -> Any:
    if value is None:
        return None
    s = str(value)
    if len(s) <= 8:
        return "***"
    return f"{s[:4]}…{s[-3:]}"


def _redact_obj(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: (_mask_scalar(v) if _SENSITIVE_KEY_RE.search(str(k)) else _redact_obj(v)) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_redact_obj(i) for i in obj]
    return obj


def _serialize_value(value: Any, max_length: int = 1000) -> Any:
    """Safely serialize a value for logging.

    Args:
        value: Value to serialize
        max_length: Maximum string length for truncation

    Returns:
        Serializable representation of the value
    """
    try:
        # Handle Pydantic models
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", exclude_unset=True)

        json_str = json.dumps(value, default=str)
        if len(json_str) > max_length:
            return json_str[:max_length] + "..."
        return json.loads(json_str)

    except (TypeError, ValueError):
        str_repr = str(value)
        if len(str_repr) > max_length:
            return str_repr[:max_length] + "..."
        return str_repr


def _serialize_kwargs(kwargs: dict[str, Any], max_length: int) -> dict[str, Any]:
    return _redact_obj({k: _serialize_value(v, max_length) for k, v in kwargs.items()})


def debug_wrapper(
    *,
    capture_result: bool = False,
    capture_args: bool = True,
    max_arg_length: int = 300,
    log_level: str = "DEBUG",
    add_metadata: dict[str, Any] | None = None,
) -> Callable[[F], F]:
    """Decorator for function tracing.

    Logs entry, exit, duration and failures (with traceback) of sync and
    async callables. The first positional argument is skipped when the
    function is a method, so adapters never log ``self``.

    Example:
        >>> @debug_wrapper(capture_result=True)
        ... async def fetch_match(match_id: str) -> dict:
        ...     return {"match_id": match_id}
    """

    def decorator(func: F) -> F:
        function_name = f"{func.__module__}.{func.__qualname__}"
        is_method = "." in func.__qualname__
        metadata = add_metadata or {}

        def _entry_fields(args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
            if not capture_args:
                return {}
            shown = args[1:] if is_method else args
            return {
                "args": [_serialize_value(a, max_arg_length) for a in shown],
                "kwargs": _serialize_kwargs(kwargs, max_arg_length),
            }

        def _log_failure(execution_id: str, start: float, exc: Exception) -> None:
            logger.error(
                f"Error in function: {function_name}",
                execution_id=execution_id,
                duration_ms=(time.perf_counter() - start) * 1000,
                error_type=type(exc).__name__,
                error_message=str(exc),
                traceback=traceback.format_exc(),
                **metadata,
            )

        def _log_success(execution_id: str, start: float, result: Any) -> None:
            logger.log(
                logging.getLevelName(log_level.upper()),
                f"Successfully executed: {function_name}",
                execution_id=execution_id,
                duration_ms=(time.perf_counter() - start) * 1000,
                result=_redact_obj(_serialize_value(result, max_arg_length)) if capture_result else None,
                **metadata,
            )

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            execution_id = f"{function_name}_{int(time.time() * 1000000)}"
            bind_contextvars(execution_id=execution_id)
            logger.log(
                logging.getLevelName(log_level.upper()),
                f"Executing async function: {function_name}",
                **_entry_fields(args, kwargs),
                **metadata,
            )
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _log_failure(execution_id, start, e)
                raise
            finally:
                unbind_contextvars("execution_id")
            _log_success(execution_id, start, result)
            return result

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            execution_id = f"{function_name}_{int(time.time() * 1000000)}"
            bind_contextvars(execution_id=execution_id)
            logger.log(
                logging.getLevelName(log_level.upper()),
                f"Executing function: {function_name}",
                **_entry_fields(args, kwargs),
                **metadata,
            )
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _log_failure(execution_id, start, e)
                raise
            finally:
                unbind_contextvars("execution_id")
            _log_success(execution_id, start, result)
            return result

        if asyncio.iscoroutinefunction(func):
            return cast(F, async_wrapper)
        return cast(F, sync_wrapper)

    return decorator


def trace_adapter(func: F) -> F:
    """Decorator specifically for adapter layer functions."""
    return debug_wrapper(
        capture_result=False,
        capture_args=True,
        log_level="DEBUG",
        add_metadata={"layer": "adapter"},
    )(func)


def trace_service(func: F) -> F:
    """Decorator for service entry points."""
    return debug_wrapper(
        capture_result=False,
        capture_args=True,
        log_level="INFO",
        add_metadata={"layer": "service"},
    )(func)
