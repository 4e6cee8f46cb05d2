from __future__ import annotations

import copy
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .model import Dataset
from .repository import RecordStore

logger = logging.getLogger(__name__)


class DatasetManager:
    """Owns the process-wide dataset and its load/save lifecycle.

    Writers go through transaction(): a single lock serializes every
    read-modify-write cycle, the body works on a private copy, and the copy
    only becomes current after the store has saved it. snapshot() returns the
    committed dataset itself and is read-only; services hand out copies.
    """

    def __init__(self, store: RecordStore):
        self._store = store
        self._lock = threading.RLock()
        self._current = store.load()
        logger.debug(
            "Dataset loaded (teachers=%d, students=%d)",
            len(self._current.teachers),
            len(self._current.students),
        )

    def snapshot(self) -> Dataset:
        return self._current

    @contextmanager
    def transaction(self) -> Iterator[Dataset]:
        with self._lock:
            working = copy.deepcopy(self._current)
            yield working
            self._store.save(working)
            self._current = working
