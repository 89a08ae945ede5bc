import os
import json
import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from pydantic import ValidationError

from error import PersistenceError
from schema.contact import ContactEntry
from util.error import handle_storage_error

logger = logging.getLogger(__name__)


class ContactStore(ABC):
    """Append-only log of contact submissions"""

    @abstractmethod
    async def append(self, entry: ContactEntry) -> None:
        ...

    @abstractmethod
    async def read_all(self) -> List[ContactEntry]:
        ...


class JsonFileContactStore(ContactStore):
    """
    Contact log kept as a single JSON array on disk.

    Every append is a full read-modify-write of the file. The lock makes this
    instance the only writer; run one store per log file.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def append(self, entry: ContactEntry) -> None:
        async with self._lock:
            await asyncio.to_thread(self._append, entry)
        logger.info(f"Stored contact from {entry.name} received at {entry.received_at.isoformat()}")

    async def read_all(self) -> List[ContactEntry]:
        async with self._lock:
            records = await asyncio.to_thread(self._read_records)
        return [ContactEntry.model_validate(record) for record in records]

    def _append(self, entry: ContactEntry) -> None:
        records = self._read_records()
        records.append(entry.to_record())
        self._write_records(records)

    def _read_records(self) -> List[dict]:
        if not self.path.exists():
            return []

        with handle_storage_error(f"reading {self.path}"):
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)

        if not isinstance(records, list):
            raise PersistenceError(f"{self.path} does not hold a list of contacts")
        try:
            for record in records:
                ContactEntry.model_validate(record)
        except ValidationError as e:
            raise PersistenceError(f"{self.path} holds a malformed contact") from e
        return records

    def _write_records(self, records: List[dict]) -> None:
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        with handle_storage_error(f"writing {self.path}"):
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
            os.replace(tmp_path, self.path)
