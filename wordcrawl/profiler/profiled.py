"""Static marking of interface operations whose duration should be recorded."""
import inspect
from typing import Callable, FrozenSet, Iterator, Tuple, TypeVar

F = TypeVar("F", bound=Callable)

_MARKER = "__profiled__"
# Bases that never declare capability operations.
_SKIPPED_BASES = frozenset({"builtins.object", "typing.Protocol", "typing.Generic", "abc.ABC"})


def profiled(fn: F) -> F:
    """Mark an interface method as profiled.

    Usage::

        class PageSource(Protocol):
            @profiled
            def fetch(self, url: str) -> PageResult: ...
    """
    setattr(fn, _MARKER, True)
    return fn


def is_profiled(fn) -> bool:
    return bool(getattr(fn, _MARKER, False))


def _declared(interface: type) -> Iterator[Tuple[str, Callable]]:
    seen = set()
    for klass in interface.__mro__:
        if f"{klass.__module__}.{klass.__qualname__}" in _SKIPPED_BASES:
            continue
        for name, value in vars(klass).items():
            if name.startswith("_") or name in seen or not inspect.isfunction(value):
                continue
            seen.add(name)
            yield name, value


def interface_operations(interface: type) -> FrozenSet[str]:
    """Public operation names declared on `interface` and its bases."""
    return frozenset(name for name, _ in _declared(interface))


def profiled_operations(interface: type) -> FrozenSet[str]:
    """Operation names on `interface` marked with @profiled."""
    return frozenset(name for name, fn in _declared(interface) if is_profiled(fn))
