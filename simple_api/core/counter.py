"""Atomic Counter — process-local increment-and-read integer.

Invariants:
    - Starts at 0; the first increment_and_get() returns 1
    - Every call increments exactly once; N calls return exactly {1..N}
    - No read-only accessor: observing the value always increments it
    - Never persisted, reset only by constructing a new instance

Design Decisions:
    - next() on itertools.count is a single C-level call under the GIL, so the
      increment and the read cannot interleave with another thread
    - One instance per application (app.state.counter), injected into the handler
"""

import itertools


class AtomicCounter:
    """Monotonic request counter shared by all handler instances of one app."""

    def __init__(self) -> None:
        self._values = itertools.count(1)

    def increment_and_get(self) -> int:
        return next(self._values)
