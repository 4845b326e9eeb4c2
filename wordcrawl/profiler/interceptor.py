"""Proxy generation that routes profiled calls through a ProfilingState."""
import functools
import logging
from datetime import timedelta
from typing import Any, Callable, FrozenSet

from .profiling_state import ProfilingState

logger = logging.getLogger(__name__)


class ProfilingMethodInterceptor:
    """Times profiled operations of one delegate and records them in `state`.

    The key is the delegate's concrete class, so several interfaces backed
    by the same implementation share their counters.
    """

    def __init__(self, clock: Callable[[], float], state: ProfilingState, delegate: Any, profiled: FrozenSet[str]):
        if clock is None or state is None or delegate is None:
            raise ValueError("clock, state and delegate are required")
        self.clock = clock
        self.state = state
        self.delegate = delegate
        self.profiled = frozenset(profiled)

    def invoke(self, name: str, args: tuple, kwargs: dict) -> Any:
        method = getattr(self.delegate, name)
        if name not in self.profiled:
            return method(*args, **kwargs)

        start = self.clock()
        try:
            return method(*args, **kwargs)
        finally:
            elapsed = timedelta(seconds=max(0.0, self.clock() - start))
            self.state.record(type(self.delegate), name, elapsed)


class _ProfilingProxy:
    """Base for generated proxies. Identity-style operations go straight to the delegate."""

    __slots__ = ("_interceptor",)

    def __init__(self, interceptor: ProfilingMethodInterceptor):
        self._interceptor = interceptor

    def __getattr__(self, name: str) -> Any:
        if name == "_interceptor":
            raise AttributeError(name)
        return getattr(self._interceptor.delegate, name)

    def __eq__(self, other: object) -> bool:
        return self._interceptor.delegate == other

    def __hash__(self) -> int:
        return hash(self._interceptor.delegate)

    def __repr__(self) -> str:
        return repr(self._interceptor.delegate)

    def __str__(self) -> str:
        return str(self._interceptor.delegate)


def _forwarder(interface: type, name: str) -> Callable:
    declared = getattr(interface, name)

    @functools.wraps(declared)
    def forward(self, *args, **kwargs):
        return self._interceptor.invoke(name, args, kwargs)

    return forward


def build_proxy(interface: type, operations: FrozenSet[str], interceptor: ProfilingMethodInterceptor) -> Any:
    """Create a class exposing every operation of `interface` and one instance of it backed by `interceptor`."""
    namespace = {"__slots__": ()}
    for name in sorted(operations):
        namespace[name] = _forwarder(interface, name)
    proxy_cls = type(f"Profiled{interface.__name__}", (_ProfilingProxy,), namespace)
    logger.debug(
        "Built %s over %s (profiled: %s)",
        proxy_cls.__name__,
        type(interceptor.delegate).__qualname__,
        ", ".join(sorted(interceptor.profiled)),
    )
    return proxy_cls, proxy_cls(interceptor)
