from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Union

from ..core.exceptions import StorageError
from .model import Dataset
from .repository import RecordStore

logger = logging.getLogger(__name__)


class JsonFileRecordStore(RecordStore):
    """Dataset persisted as a single JSON document.

    Writes go to a temporary file next to the target and are moved into place
    with os.replace, so readers never observe a half-written snapshot.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dataset:
        if not self._path.exists():
            logger.info("No data file at %s, starting with an empty dataset", self._path)
            dataset = Dataset()
            self.save(dataset)
            return dataset

        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            return Dataset.from_dict(raw)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Cannot read data file %s: %s", self._path, e)
            raise StorageError(f"Cannot read data file {self._path}: {e}") from e

    def save(self, dataset: Dataset) -> None:
        payload = json.dumps(dataset.to_dict(), ensure_ascii=False, indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self._path)
            except BaseException:
                with suppress(FileNotFoundError):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.exception("Cannot write data file %s", self._path)
            raise StorageError(f"Cannot write data file {self._path}: {e}") from e
