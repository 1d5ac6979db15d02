import threading
from contextlib import contextmanager
from typing import List, Optional

from .filters import record_matches
from .models import FilterSet, StringRecord


class StringRepository:
    """
    In-memory store of analyzed strings, kept in insertion order.

    Every operation takes the same re-entrant lock, so a threaded server
    never interleaves two of them. Use ``atomic()`` to run a
    check-then-insert sequence as one critical section.
    """

    def __init__(self):
        self._records: List[StringRecord] = []
        self._lock = threading.RLock()

    @contextmanager
    def atomic(self):
        with self._lock:
            yield self

    def insert(self, record: StringRecord) -> StringRecord:
        # Uniqueness is the caller's job; see services.create_string
        with self._lock:
            self._records.append(record)
        return record

    def find_by_id(self, record_id: str) -> Optional[StringRecord]:
        with self._lock:
            return next((r for r in self._records if r.id == record_id), None)

    def find_by_value(self, value: str) -> Optional[StringRecord]:
        with self._lock:
            return next((r for r in self._records if r.value == value), None)

    def find_all(self, filters: Optional[FilterSet] = None) -> List[StringRecord]:
        filters = filters or FilterSet()
        with self._lock:
            return [r for r in self._records if record_matches(r, filters)]

    def delete_by_value(self, value: str) -> bool:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.value == value:
                    del self._records[index]
                    return True
        return False

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self):
        with self._lock:
            self._records.clear()
