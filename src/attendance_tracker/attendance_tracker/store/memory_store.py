from __future__ import annotations

import copy
from typing import Optional

from .model import Dataset
from .repository import RecordStore


class InMemoryRecordStore(RecordStore):
    """Keeps the last saved snapshot as plain dicts (used by tests and demos)."""

    def __init__(self, initial: Optional[dict] = None):
        self._payload = copy.deepcopy(initial) if initial is not None else Dataset().to_dict()
        self.save_count = 0

    def load(self) -> Dataset:
        return Dataset.from_dict(copy.deepcopy(self._payload))

    def save(self, dataset: Dataset) -> None:
        self._payload = dataset.to_dict()
        self.save_count += 1

    def snapshot(self) -> dict:
        return copy.deepcopy(self._payload)
