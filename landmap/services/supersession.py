"""Last-request-wins bookkeeping for asynchronous requests."""

import itertools
from collections import defaultdict


class RequestSequencer:
    """Hands out request tokens per target and tells whether one is stale.

    A result is applied only if its token is still the latest issued for its
    target; anything that completes after a newer request was started is
    dropped.
    """

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest: dict[str, int] = defaultdict(int)

    def begin(self, target: str) -> int:
        """Start a request for target and return its token."""
        token = next(self._counter)
        self._latest[target] = token
        return token

    def is_current(self, target: str, token: int) -> bool:
        """Check whether token is the newest request for target."""
        return self._latest[target] == token

    def cancel(self, target: str) -> None:
        """Invalidate any in-flight request for target."""
        self._latest[target] = next(self._counter)
