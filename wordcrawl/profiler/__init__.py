"""Call-timing instrumentation for any component behind an interface."""
from .profiled import profiled as profiled
from .profiling_state import ProfiledOperationKey as ProfiledOperationKey
from .profiling_state import ProfilingState as ProfilingState
from .profiler import Profiler as Profiler

__all__ = ["profiled", "ProfiledOperationKey", "ProfilingState", "Profiler"]
