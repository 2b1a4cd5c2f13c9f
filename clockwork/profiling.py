"""
Opt-in timing of the tree engine.

Disabled by default; ``profiler.enable()`` turns recording on and
prints a summary table when the process exits.
"""

import time
from contextlib import contextmanager
from functools import wraps
from collections import defaultdict
from typing import Dict, List, Tuple
import atexit


class Profiler:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.stats: Dict[str, Dict] = defaultdict(lambda: {'calls': 0, 'total_time': 0.0})
        self.enabled = False
        self._registered = False

    def enable(self):
        self.enabled = True
        if not self._registered:
            atexit.register(self.print_stats)
            self._registered = True

    def disable(self):
        self.enabled = False

    def record(self, name: str, elapsed: float):
        if not self.enabled:
            return
        self.stats[name]['calls'] += 1
        self.stats[name]['total_time'] += elapsed

    def summary(self) -> List[Tuple[str, int, float, float]]:
        """Rows of (name, calls, total seconds, average ms), slowest first."""
        rows = []
        for name, data in self.stats.items():
            calls = data['calls']
            total = data['total_time']
            avg_ms = (total / calls * 1000) if calls > 0 else 0.0
            rows.append((name, calls, total, avg_ms))
        return sorted(rows, key=lambda row: row[2], reverse=True)

    def print_stats(self):
        rows = self.summary()
        if not rows:
            return

        print("\n" + "=" * 70)
        print("CLOCKWORK PROFILING RESULTS")
        print("=" * 70)
        print(f"{'Function':<35} {'Calls':>10} {'Total(s)':>10} {'Avg(ms)':>10}")
        print("-" * 70)
        for name, calls, total, avg_ms in rows:
            print(f"{name:<35} {calls:>10} {total:>10.3f} {avg_ms:>10.3f}")
        print("=" * 70)

    def reset(self):
        self.stats.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not profiler.enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        profiler.record(func.__qualname__, time.perf_counter() - start)
        return result
    return wrapper


@contextmanager
def profile_block(name: str):
    """Time a `with` block under `name`; a no-op while the profiler is disabled."""
    if not profiler.enabled:
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        profiler.record(name, time.perf_counter() - start)
