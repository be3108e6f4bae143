"""Utility functions and decorators for distributed tracing.

Only opentelemetry-api is required; without a configured SDK the tracer
is a no-op and spans cost next to nothing.
"""

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

T = TypeVar("T")

# Argument names recorded as span attributes. Payload values are never recorded.
_SAFE_SPAN_ATTR_KEYS = frozenset({"locale", "group", "namespace", "prefix", "key", "ttl_minutes"})


def _set_safe_span_attrs(span: trace.Span, arguments: dict[str, Any]) -> None:
    """Set span attributes from bound arguments; only allowlisted names are recorded."""
    for name, value in arguments.items():
        if name in _SAFE_SPAN_ATTR_KEYS:
            span.set_attribute(f"arg.{name}", str(value))


def traced(
    operation_name: str | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator to run a coroutine function inside a span.

    Allowlisted arguments are recorded whether passed by position or by
    keyword. An exception sets the span status to ERROR, is recorded once
    and re-raised.

    Args:
        operation_name: Span name (defaults to module.funcname).

    Returns:
        Decorated coroutine function.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            with tracer.start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                try:
                    bound = signature.bind(*args, **kwargs)
                except TypeError:
                    # Let the call itself raise the usual TypeError
                    pass
                else:
                    bound.apply_defaults()
                    _set_safe_span_attrs(span, bound.arguments)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
