"""
Registry — the process-wide namespace state for debug channels.

Holds the compiled allow/deny matchers, the list of live Debugger
instances, and the custom formatter table. Enabling a spec recompiles
the matchers and then walks every live channel to recompute its
``enabled`` flag, so channels never look anything up when they emit.

Precedence:
    deny patterns  >  allow patterns  >  disabled (default)

    enable("server:*,-server:debug")
        server:http   -> enabled
        server:debug  -> disabled (deny wins)
        client        -> disabled (no allow match)

The registry is seeded from the ``DEBUG`` environment variable when it
is created and persists every enable() back to it.
"""

import sys
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from .env import EnvStore, InspectOptions, load_inspect_options
from .patterns import Matcher, compile_spec, serialize_matchers
from .sinks import Sink, StreamSink


def _wall_clock_ms() -> float:
    return time.time() * 1000


class Registry:
    """Namespace matchers, live channels and custom formatters.

    Usage::

        reg = Registry(env=EnvStore({}))
        http = reg.create("server:http")
        reg.enable("server:*")
        http.enabled            # True
        reg.disable()           # -> "server:*"

    One lock serializes enable() (compile plus re-evaluation walk),
    register() and unregister(); the registry is safe to share between
    threads.
    """

    def __init__(
        self,
        env: EnvStore = None,
        inspect_opts: InspectOptions = None,
        default_sink: Sink = None,
        clock: Callable[[], float] = None,
    ):
        self.env = env if env is not None else EnvStore()
        self.inspect_opts = (inspect_opts if inspect_opts is not None
                             else load_inspect_options(self.env.environ))
        self.default_sink: Sink = default_sink if default_sink is not None else StreamSink()
        self.clock = clock if clock is not None else _wall_clock_ms
        self.formatters: Dict[str, Callable] = {}
        # (allow, deny); always replaced as a single tuple
        self._matchers: Tuple[List[Matcher], List[Matcher]] = ([], [])
        self._instances: list = []
        self._lock = threading.RLock()
        self.enable(self.env.load())

    # -- matchers ---------------------------------------------------------

    @property
    def names(self) -> List[Matcher]:
        """Allow matchers, in spec order (copy)."""
        return list(self._matchers[0])

    @property
    def skips(self) -> List[Matcher]:
        """Deny matchers, in spec order (copy)."""
        return list(self._matchers[1])

    @property
    def instances(self) -> list:
        """Live channels, in registration order (copy)."""
        return list(self._instances)

    def enable(self, spec) -> None:
        """Replace the enabled namespaces with ``spec``.

        Persists the spec to the environment (an empty or non-string spec
        clears it), recompiles the matchers and updates every live
        channel before returning.
        """
        with self._lock:
            self.env.save(spec)
            self._matchers = compile_spec(spec)
            for instance in self._instances:
                instance.enabled = self.enabled(instance.namespace)

    def disable(self) -> str:
        """Disable everything and return the spec that was active.

        The returned string can be handed back to enable() to restore
        an equivalent configuration.
        """
        with self._lock:
            spec = serialize_matchers(*self._matchers)
            self.enable('')
        return spec

    def enabled(self, namespace: str) -> bool:
        """Return True if ``namespace`` is enabled by the current matchers.

        A namespace ending in ``*`` is always reported enabled, without
        consulting the deny list. Otherwise deny matches win, then allow
        matches; anything unmatched is disabled.
        """
        if namespace.endswith('*'):
            return True
        names, skips = self._matchers
        for skip in skips:
            if skip.matches(namespace):
                return False
        for name in names:
            if name.matches(namespace):
                return True
        return False

    # -- channels ---------------------------------------------------------

    def register(self, instance) -> None:
        """Track a channel for re-evaluation on enable().

        The channel's ``enabled`` flag is computed under the same lock as
        the enable() walk, so a concurrent enable() either sees the channel
        or has already swapped in the matchers it is evaluated against.
        """
        with self._lock:
            instance.enabled = self.enabled(instance.namespace)
            if not any(existing is instance for existing in self._instances):
                self._instances.append(instance)

    def unregister(self, instance) -> bool:
        """Stop tracking a channel. Returns False if it was not tracked."""
        with self._lock:
            for index, existing in enumerate(self._instances):
                if existing is instance:
                    del self._instances[index]
                    return True
            return False

    def create(self, namespace: str, sink: Sink = None):
        """Create a Debugger bound to this registry."""
        from .debugger import Debugger
        return Debugger(namespace, sink=sink, registry=self)

    def use_colors(self) -> bool:
        """Default color mode for new channels.

        DEBUG_COLORS wins when set; otherwise colors are used only when
        stderr is a terminal.
        """
        if self.inspect_opts.colors is not None:
            return self.inspect_opts.colors
        try:
            return sys.stderr.isatty()
        except (AttributeError, ValueError):
            return False


# =============================================================================
# Module-level singleton
# =============================================================================

_registry: Optional[Registry] = None


def init_registry(env: EnvStore = None, inspect_opts: InspectOptions = None,
                  default_sink: Sink = None,
                  clock: Callable[[], float] = None) -> Registry:
    """Initialize the module-level Registry singleton.

    Call once at program startup, or in tests to start from a clean slate.

    Args:
        env: Environment store (default: os.environ / DEBUG)
        inspect_opts: Display options (default: parsed from DEBUG_*)
        default_sink: Fallback sink for channels without their own
        clock: Millisecond clock used for elapsed times

    Returns:
        The initialized Registry instance
    """
    global _registry
    _registry = Registry(env=env, inspect_opts=inspect_opts,
                         default_sink=default_sink, clock=clock)
    return _registry


def get_registry() -> Registry:
    """Get the module-level Registry, creating a default if needed."""
    global _registry
    if _registry is None:
        _registry = Registry()
    return _registry
