"""
Function tracing decorator.

Routes trace output through the ColorLogger singleton at the debug
level, so it follows the logger's threshold instead of its own switch.
"""

import functools
import inspect
from pathlib import Path


def traced(func):
    """Decorator to log function calls via the ColorLogger singleton.

    Shows function entry/exit with arguments and return values when the
    'debug' level is enabled. Nothing is formatted otherwise.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .logger import get_logger

        out = get_logger()
        if not out.is_level_enabled('debug'):
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__name__

        args_repr = []

        # Methods: show 'self' rather than the instance repr
        remaining_args = args
        if args and _is_method_call(func, args[0]):
            args_repr.append('self')
            remaining_args = args[1:]

        for arg in remaining_args:
            args_repr.append(_short_repr(arg))
        for key, value in kwargs.items():
            args_repr.append(f"{key}={_short_repr(value)}")

        args_str = ', '.join(args_repr)

        out.debug(f"[TRACE] >> {module_name}.{func_name}({args_str})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.debug(f"[TRACE] !! {module_name}.{func_name} raised: "
                      f"{type(e).__name__}: {e}")
            raise

        if result is not None:
            out.debug(f"[TRACE] << {module_name}.{func_name} returned: "
                      f"{_short_repr(result)}")
        return result

    return wrapper


def _is_method_call(func, first):
    attr = getattr(type(first), func.__name__, None)
    return getattr(attr, '__wrapped__', None) is func


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)
