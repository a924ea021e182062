"""
Monotonic start-order counter for matches.
"""

import threading


class MatchSequence:
    """Issues strictly increasing start-order values.

    Unlike the registry, next_order() is safe to call from several threads.
    """

    def __init__(
        self,
        start: int = 0,
    ) -> None:
        self._current = start
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        """Last value handed out (the start value if none yet)."""
        return self._current

    def next_order(self) -> int:
        """
        Advance the counter.

        @return: The next start-order value
        """
        with self._lock:
            self._current += 1
            return self._current
