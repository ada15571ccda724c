from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxdict = 8
_repr.maxlist = 8
_repr.maxtuple = 8


def safe_repr(value: Any, *, max_items: int = 5, max_length: int = 300) -> str:
    """Render *value* for log output without dumping large containers."""

    if isinstance(value, np.ndarray):
        if value.size <= max_items:
            return f"ndarray({value.tolist()!r})"
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"

    if isinstance(value, Mapping):
        items = []
        for idx, (key, val) in enumerate(value.items()):
            if idx >= max_items:
                items.append(f"... ({len(value)} total)")
                break
            items.append(f"{safe_repr(key)}: {safe_repr(val)}")
        return "{" + ", ".join(items) + "}"

    if isinstance(value, (list, tuple)):
        head = [safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            head.append("...")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{', '.join(head)}{close_br}"

    symbol = getattr(value, "symbol", None)
    if isinstance(symbol, str):
        return f"<{type(value).__name__} {symbol}>"

    if callable(value):
        return f"<callable {getattr(value, '__qualname__', type(value).__name__)}>"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    parts = [safe_repr(arg) for arg in args]
    parts.extend(f"{key}={safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG lines around every call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", "<callable>")

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )
