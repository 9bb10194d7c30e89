"""
Utility decorators for journal operations.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from contextlib import nullcontext
from typing import Any

from loguru import logger

from zentrade.core.exceptions.journal import TradeNotFoundError

_CONTEXT_PARAMS = ("trade_id", "trade", "term", "path")


def _serialize_parameter_value(value: Any) -> Any:
    """Serialize parameter value for logging."""
    if hasattr(value, "id") and hasattr(value, "symbol"):
        return f"{value.symbol}#{value.id}"  # Handle trades
    elif hasattr(value, "value"):
        return str(value.value)  # Handle enum values
    else:
        return str(value)


def _extract_operation_context(func: Callable[..., Any], args: tuple, kwargs: dict) -> dict:
    """Extract the loggable arguments of a journal operation."""
    bound_args = inspect.signature(func).bind(*args, **kwargs)
    bound_args.apply_defaults()

    context = {"correlation_id": str(uuid.uuid4())[:8]}
    for param_name, value in bound_args.arguments.items():
        if param_name in _CONTEXT_PARAMS and value is not None:
            context[param_name] = _serialize_parameter_value(value)
    return context


def log_operation[F: Callable[..., Any]](func: F) -> F:
    """Decorator to log journal operations with correlation IDs and timings."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func_name = func.__name__
        context = _extract_operation_context(func, args, kwargs)

        logger.debug(f"Journal operation started: {func_name}", extra=context)
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(
                f"Journal operation failed: {func_name} ({type(e).__name__}: {e})",
                extra={**context, "success": False, "execution_time_ms": elapsed_ms},
            )
            raise

        elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.success(
            f"Journal operation completed: {func_name}",
            extra={**context, "success": True, "execution_time_ms": elapsed_ms},
        )
        return result

    return wrapper  # type: ignore


def _check_trade_exists(
    args: tuple[Any, ...], kwargs: dict[str, Any], id_param: str, func: Callable[..., Any]
) -> None:
    """Check that the targeted trade is in the journal before execution."""
    bound_args = inspect.signature(func).bind(*args, **kwargs)
    bound_args.apply_defaults()

    self_obj = bound_args.arguments.get("self")
    target = bound_args.arguments.get(id_param)
    trade_id = getattr(target, "id", target)

    if self_obj is not None and trade_id is not None and not self_obj.contains(trade_id):
        raise TradeNotFoundError(trade_id)


def require_trade[F: Callable[..., Any]](id_param: str = "trade_id") -> Callable[[F], F]:
    """Decorator to ensure a trade exists before executing the method.

    The named parameter may hold either a trade id or a trade object. When
    the owner has a `_lock`, the check and the call run under it.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            owner = args[0] if args else None
            with getattr(owner, "_lock", None) or nullcontext():
                _check_trade_exists(args, kwargs, id_param, func)
                return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
