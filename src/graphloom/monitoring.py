"""Optional observation of completed API calls.

The client notifies a :class:`CallObserver` after every transport call with
the URL, the elapsed time and whether a non-error response came back.
:class:`NullObserver` ignores the calls; :class:`CallStatistics` keeps
per-path counters and timings.
"""

import threading
from typing import Protocol
from urllib.parse import urlsplit

from pydantic import BaseModel


class CallObserver(Protocol):
    """Receives one notification per completed transport call."""

    def on_call_completed(self, url: str, elapsed: float, success: bool) -> None:
        """Called after a call finished.

        Args:
            url: The requested URL.
            elapsed: Wall-clock duration in seconds.
            success: True if a response with a status below 300 was received,
                or a redirect when the call expected one.
        """
        ...


class NullObserver:
    """Observer that does nothing."""

    def on_call_completed(self, url: str, elapsed: float, success: bool) -> None:
        pass


class CallSummary(BaseModel):
    """Aggregated timings for one URL path (or for all calls).

    Attributes:
        calls: Number of completed calls.
        errors: Number of calls that did not succeed.
        total_time: Sum of elapsed times in seconds.
    """

    calls: int = 0
    errors: int = 0
    total_time: float = 0.0

    @property
    def average_time(self) -> float:
        return self.total_time / self.calls if self.calls else 0.0


class CallStatistics:
    """Observer aggregating call counts, error counts and timings per path.

    Paths are the URL without its query string, so tokens and cursors do not
    split the statistics. One instance can be shared between clients.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._per_path: dict[str, CallSummary] = {}
        self._total = CallSummary()

    def on_call_completed(self, url: str, elapsed: float, success: bool) -> None:
        key = _path_of(url)
        with self._lock:
            path_summary = self._per_path.setdefault(key, CallSummary())
            for summary in (path_summary, self._total):
                summary.calls += 1
                summary.total_time += elapsed
                if not success:
                    summary.errors += 1

    @property
    def total(self) -> CallSummary:
        with self._lock:
            return self._total.model_copy()

    def for_path(self, url: str) -> CallSummary:
        """Returns the summary for the path of ``url`` (empty if never called)."""
        with self._lock:
            summary = self._per_path.get(_path_of(url))
            return summary.model_copy() if summary else CallSummary()

    def snapshot(self) -> dict[str, CallSummary]:
        """Returns a copy of the per-path summaries."""
        with self._lock:
            return {path: s.model_copy() for path, s in self._per_path.items()}

    def reset(self) -> None:
        with self._lock:
            self._per_path.clear()
            self._total = CallSummary()


def _path_of(url: str) -> str:
    parts = urlsplit(url)
    if not parts.netloc:
        return parts.path
    return f"{parts.scheme}://{parts.netloc}{parts.path}"
