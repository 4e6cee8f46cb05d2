from __future__ import annotations

from typing import Protocol

from .model import Dataset


class RecordStore(Protocol):
    """Repository interface for the whole dataset.

    Note: save() is a full snapshot overwrite, never an incremental patch.
    """

    def load(self) -> Dataset:
        raise NotImplementedError

    def save(self, dataset: Dataset) -> None:
        raise NotImplementedError
