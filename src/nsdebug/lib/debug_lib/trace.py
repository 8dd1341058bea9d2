"""
Function tracing decorator.

Routes call/return/raise lines through a Debugger channel, so tracing is
switched on and off with the same enable spec as everything else:

    log = create_debug("app:trace")

    @trace(log)
    def load(path): ...

    $ DEBUG=app:trace python app.py
"""

import functools
import inspect
from pathlib import Path


def _short_repr(value):
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, list) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(debugger):
    """Decorator factory tracing calls on ``debugger``.

    Shows function entry with arguments, the return value (when not None)
    and any exception raised, while the channel is enabled. Disabled
    channels add nothing but an attribute check per call.
    """
    def decorator(func):
        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        func_name = func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not debugger.enabled:
                return func(*args, **kwargs)

            args_repr = [_short_repr(arg) for arg in args]
            args_repr.extend(f"{key}={_short_repr(value)}"
                             for key, value in kwargs.items())

            debugger.emit(">> %s.%s(%s)", module_name, func_name, ', '.join(args_repr))

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                debugger.emit("!! %s.%s raised: %s: %s",
                              module_name, func_name, type(e).__name__, str(e))
                raise

            if result is not None:
                debugger.emit("<< %s.%s returned: %s",
                              module_name, func_name, _short_repr(result))
            return result

        return wrapper
    return decorator
