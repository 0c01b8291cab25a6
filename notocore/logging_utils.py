from __future__ import annotations

import logging
import reprlib
import time
from functools import wraps
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxstring = 80
_repr.maxdict = 10
_repr.maxlist = 10
_repr.maxtuple = 10
_repr.maxset = 10


def _sequence_brackets(value: Sequence[Any]) -> Tuple[str, str]:
    if isinstance(value, tuple):
        return "(", ")"
    if isinstance(value, set):
        return "{", "}"
    if isinstance(value, frozenset):
        return "frozenset({", "})"
    return "[", "]"


def _summarize_array(value: np.ndarray, *, max_items: int) -> str:
    size = int(value.size)
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})", f"size={size}"]
    if 0 < size <= max_items:
        parts.append(f"values={_repr.repr(value.tolist())}")
    elif size > max_items:
        parts.extend([f"min={float(value.min()):.6g}", f"max={float(value.max()):.6g}"])
    return ", ".join(parts)


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    if isinstance(value, np.ndarray):
        return _summarize_array(value, max_items=max_items)

    # Drawings and strokes summarise themselves; a full dataclass repr of
    # a page of ink is thousands of points long.
    summary = getattr(value, "log_summary", None)
    if callable(summary) and not isinstance(value, type):
        return summary()

    if isinstance(value, str) and len(value) > max_length:
        return f"str(len={len(value)}, head={value[:40]!r})"

    if isinstance(value, dict):
        items = []
        for idx, (key, val) in enumerate(value.items()):
            if idx >= max_items:
                items.append("...")
                break
            items.append(f"{_safe_repr(key)}: {_safe_repr(val)}")
        return "{" + ", ".join(items) + "}"

    if isinstance(value, (list, tuple, set, frozenset)):
        open_br, close_br = _sequence_brackets(value)  # type: ignore[arg-type]
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append("...")
                break
            items.append(_safe_repr(item))
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_call(name: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    rendered = [_safe_repr(arg) for arg in args]
    rendered.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return f"{name}({', '.join(rendered)})"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Trace calls of the decorated function at DEBUG level.

    Each call logs its summarised arguments on entry and the elapsed time
    on exit, plus the summarised result unless ``log_result`` is false.
    A raised exception is logged with its traceback and re-raised.
    Nothing is formatted while DEBUG is disabled for ``logger``.
    """

    def decorator(func: F) -> F:
        label = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)

            logger.debug("Entering %s", _format_call(label, args, kwargs))
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("%s raised after %.3f ms", label, (time.perf_counter() - started) * 1e3)
                raise
            elapsed = (time.perf_counter() - started) * 1e3
            if log_result:
                logger.debug("%s returned %s in %.3f ms", label, _safe_repr(result), elapsed)
            else:
                logger.debug("%s finished in %.3f ms", label, elapsed)
            return result

        return cast(F, wrapper)

    return decorator
