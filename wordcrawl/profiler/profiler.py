import abc
import logging
import os
import time
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional, TextIO, Type, TypeVar, Union

from wordcrawl.exceptions import InvalidTargetError
from wordcrawl.profiler.interceptor import ProfilingMethodInterceptor, build_proxy
from wordcrawl.profiler.profiled import interface_operations, profiled_operations
from wordcrawl.profiler.profiling_state import ProfilingState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Profiler:
    """Wraps components so their profiled operations are timed.

    All proxies produced by one profiler share a single `ProfilingState`.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        now: Optional[Callable[[], datetime]] = None,
        state: Optional[ProfilingState] = None,
    ):
        self.clock = clock
        self.now = now or (lambda: datetime.now(timezone.utc))
        self.state = state if state is not None else ProfilingState()

    def wrap(self, interface: Type[T], delegate: T, operations: Optional[Iterable[str]] = None) -> T:
        """Return a proxy for `delegate` exposing `interface`.

        Operations marked with @profiled on `interface` are timed; pass
        `operations` to name them explicitly instead. Raises
        InvalidTargetError when nothing would be profiled or `delegate`
        does not implement the interface.
        """
        if interface is None or delegate is None:
            raise ValueError("interface and delegate are required")

        declared = interface_operations(interface)
        if operations is None:
            marked = profiled_operations(interface)
        else:
            marked = frozenset(operations)
            unknown = marked - declared
            if unknown:
                raise InvalidTargetError(interface, f"does not declare {', '.join(sorted(unknown))}")
        if not marked:
            raise InvalidTargetError(interface)

        missing = sorted(name for name in declared if not callable(getattr(delegate, name, None)))
        if missing:
            raise InvalidTargetError(
                interface,
                f"is not implemented by {type(delegate).__qualname__} (missing {', '.join(missing)})",
            )

        interceptor = ProfilingMethodInterceptor(self.clock, self.state, delegate, marked)
        proxy_cls, proxy = build_proxy(interface, declared, interceptor)
        # Protocols are structural; only nominal ABCs need the proxy registered.
        if isinstance(interface, abc.ABCMeta) and not getattr(interface, "_is_protocol", False):
            interface.register(proxy_cls)
        return proxy

    def write_data(self, target: Union[str, "os.PathLike[str]", TextIO]) -> None:
        """Append the profiling report with a run timestamp to a path or open stream."""
        if isinstance(target, (str, os.PathLike)):
            with open(target, "a", encoding="utf-8") as f:
                self._write(f)
            logger.info("Profile data written to %s", target)
            return
        self._write(target)

    def _write(self, writer: TextIO) -> None:
        writer.write(f"Run at {self.now().isoformat()}\n")
        writer.write(self.state.report())
        writer.write("\n")
        writer.flush()
