"""Structured logging around closet tool calls."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from closet_app.logging_config import ensure_correlation_id, get_logger, log_event
from logic.validation import validation_failure

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def summarise_arguments(arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Replace closet lists by their size; leave scalars such as the occasion as-is."""

    return {
        name: {"count": len(value)} if isinstance(value, (list, tuple)) else value
        for name, value in arguments.items()
    }


def _result_size(result: Any) -> int | None:
    if isinstance(result, (list, tuple)):
        return len(result)
    return None


def _validated_arguments(
    tool_name: str, input_model: type[BaseModel], arguments: Dict[str, Any]
) -> Dict[str, Any]:
    try:
        return input_model.model_validate(arguments).model_dump()
    except ValidationError as exc:
        review = validation_failure(f"Invalid arguments for {tool_name}", exc)
        log_event(
            LOGGER,
            logging.WARNING,
            "tool_validation_failed",
            tool=tool_name,
            issues=review["issues"],
        )
        raise


def instrument_tool(
    tool_name: str,
    input_model: type[BaseModel] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log start, completion and failure of a closet tool.

    With ``input_model`` the keyword arguments are validated first and the
    tool receives the model's dump; a :class:`ValidationError` propagates.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            ensure_correlation_id()
            if input_model is not None:
                kwargs = _validated_arguments(tool_name, input_model, kwargs)

            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_started",
                tool=tool_name,
                arguments=summarise_arguments(kwargs),
            )
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "tool_call_failed",
                    tool=tool_name,
                    error_type=type(exc).__name__,
                    duration_ms=_elapsed_ms(start),
                    exc_info=True,
                )
                raise
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_completed",
                tool=tool_name,
                duration_ms=_elapsed_ms(start),
                result_size=_result_size(result),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_tool", "summarise_arguments"]
