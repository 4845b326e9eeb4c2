import threading
from datetime import timedelta
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Tuple, Union


class ProfiledOperationKey(NamedTuple):
    """Identifies one timed operation by its concrete implementation, not its interface."""
    implementation: str
    operation: str

    @classmethod
    def of(cls, implementation: Union[type, str], operation: str) -> "ProfiledOperationKey":
        if isinstance(implementation, type):
            implementation = f"{implementation.__module__}.{implementation.__qualname__}"
        return cls(implementation, operation)

    def __str__(self) -> str:
        return f"{self.implementation}#{self.operation}"


def format_duration(duration: timedelta) -> str:
    """Render a duration as `<M>m <S>s <MS>ms`."""
    total_ms = duration // timedelta(milliseconds=1)
    minutes, rest = divmod(total_ms, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes}m {seconds}s {millis}ms"


class ProfilingState:
    """Holds the recorded durations of every profiled invocation.

    One lock guards the mapping; recording and snapshot reads are serialized
    through it. Durations are only ever appended.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: Dict[ProfiledOperationKey, List[timedelta]] = {}

    def record(self, implementation: Union[type, str], operation: str, duration: timedelta) -> None:
        """Record that `implementation.operation` ran for `duration`."""
        if implementation is None or not operation or duration is None:
            raise ValueError("implementation, operation and duration are required")
        key = ProfiledOperationKey.of(implementation, operation)
        with self._lock:
            self._data.setdefault(key, []).append(duration)

    def get_data(self) -> Mapping[ProfiledOperationKey, Tuple[timedelta, ...]]:
        """Return a read-only copy of all recorded durations."""
        with self._lock:
            copy = {key: tuple(durations) for key, durations in self._data.items()}
        return MappingProxyType(copy)

    def get_invocation_count(self, key: ProfiledOperationKey) -> int:
        with self._lock:
            return len(self._data.get(key, ()))

    def get_total_duration(self, key: ProfiledOperationKey) -> timedelta:
        with self._lock:
            durations = list(self._data.get(key, ()))
        return sum(durations, timedelta(0))

    def report(self) -> str:
        """Format every recorded invocation, one per line, grouped by sorted key.

        Each line reads ``module.ClassName#operation took 1m 30s 500ms``.
        """
        lines = []
        with self._lock:
            for key in sorted(self._data):
                for duration in self._data[key]:
                    lines.append(f"{key} took {format_duration(duration)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.report()
