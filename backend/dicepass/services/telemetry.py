"""In-process counters reported by the readiness probe."""

from collections import Counter
from threading import Lock
from typing import Dict

PASSPHRASES_GENERATED = "passphrases_generated"
GENERATION_FAILURES = "generation_failures"
WORDLIST_FETCHES = "wordlist_fetches"
WORDLIST_FAILURES = "wordlist_failures"


class Counters:
    """Thread-safe named counters"""

    def __init__(self):
        self._values = Counter()
        self._lock = Lock()

    def increment(self, name: str, value: int = 1) -> None:
        with self._lock:
            self._values[name] += value

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._values)

    def reset(self) -> None:
        with self._lock:
            self._values.clear()


counters = Counters()


def increment_counter(name: str, value: int = 1) -> None:
    counters.increment(name, value)


def get_counters_snapshot() -> Dict[str, int]:
    return counters.snapshot()


def reset_counters() -> None:
    counters.reset()
