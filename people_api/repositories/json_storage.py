"""
JSON-file persistence adapter for people.

The whole key -> person mapping lives in a single JSON object. Every operation
re-reads the file and every mutation rewrites it in full; nothing is cached
between calls.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict

from people_api.domain.errors import DecodeError, EncodeError, InvalidKey, NotFound, StorageIOError
from people_api.domain.people import Person, parse_key, person_from_dict

logger = logging.getLogger(__name__)


class PeopleStore:
    """Durable mapping from integer key to Person with whole-file read-modify-write."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    # -------------------------- file io --------------------------
    def _load(self) -> Dict[int, Person]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOError(f"cannot read {self.path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise DecodeError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError(f"{self.path} must hold a JSON object")
        people: Dict[int, Person] = {}
        for raw_key, record in data.items():
            try:
                key = parse_key(raw_key)
            except InvalidKey as exc:
                raise DecodeError(f"{self.path} has a non-integer key {raw_key!r}") from exc
            people[key] = person_from_dict(record)
        return people

    def _save(self, people: Dict[int, Person]) -> None:
        try:
            payload = json.dumps(
                {str(key): person.to_dict() for key, person in people.items()},
                ensure_ascii=False,
                indent=2,
                sort_keys=True,
            ).encode("utf-8")
        except (TypeError, ValueError, UnicodeEncodeError) as exc:
            raise EncodeError(f"cannot serialize people: {exc}") from exc
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise StorageIOError(f"cannot write {self.path}: {exc}") from exc
        finally:
            # the temp file never outlives a failed save
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug("Saved %d people", len(people), extra={"db_file": str(self.path)})

    # -------------------------- people --------------------------
    def get(self, key: int) -> Person:
        with self._lock:
            people = self._load()
        person = people.get(key)
        if person is None:
            raise NotFound(f"person {key} does not exist")
        return person

    def set(self, key: int, person: Person) -> None:
        with self._lock:
            people = self._load()
            people[key] = person
            self._save(people)

    def remove(self, key: int) -> None:
        with self._lock:
            people = self._load()
            people.pop(key, None)
            self._save(people)

    def all(self) -> Dict[int, Person]:
        with self._lock:
            return self._load()
