"""JSON file storage shared by the cart and product databases"""

import os
import json
import uuid
import logging
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..core.errors import InvalidInputError, IdentifierConflictError, StorageError

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".json"


class JsonRecordStore:
    """
    One JSON document per record, stored as ``<directory>/<identifier>.json``.

    Writes replace the whole file: the document goes to a temporary file in
    the same directory first and is renamed over the target, so readers see
    either the old or the new document. Read-modify-write sequences should
    run inside ``lock(identifier)``.
    """

    def __init__(self, directory: Path, label: str = "record"):
        self.directory = Path(directory)
        self.label = label
        # identifier -> [lock, number of holders and waiters]
        self._locks: dict[str, list] = {}
        self._locks_guard = threading.Lock()

    def ensure_directory(self) -> None:
        """Create the storage directory if it is missing"""
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, identifier: str) -> Path:
        """Path of the file holding ``identifier``"""
        if (
            not identifier
            or identifier.startswith(".")
            or "/" in identifier
            or "\\" in identifier
            or os.sep in identifier
        ):
            raise InvalidInputError(f"Invalid {self.label} id: {identifier!r}")
        return self.directory / f"{identifier}{RECORD_SUFFIX}"

    def exists(self, identifier: str) -> bool:
        path = self.path_for(identifier)
        try:
            return path.is_file()
        except (OSError, ValueError):
            # e.g. ENAMETOOLONG: no record can live at such a path
            return False

    def read(self, identifier: str) -> dict:
        """
        Load and parse one record.

        Raises:
            FileNotFoundError: the record file is missing
            StorageError: the file cannot be read or is not a JSON object
        """
        path = self.path_for(identifier)
        try:
            with open(path, "r", encoding="utf-8") as f:
                contents = f.read()
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.label} file {path.name}: {e}") from e
        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise StorageError(f"Malformed {self.label} file {path.name}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Malformed {self.label} file {path.name}: not an object")
        return data

    def write(self, identifier: str, document: dict) -> None:
        """Serialize ``document`` and atomically replace the record file"""
        path = self.path_for(identifier)
        self.ensure_directory()
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.directory,
                prefix=f".{identifier}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(document, tmp)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write {self.label} {identifier}: {e}") from e

    def delete(self, identifier: str) -> None:
        """Remove a record file. ``OSError`` is left to the caller."""
        self.path_for(identifier).unlink()

    def list_identifiers(self) -> list[str]:
        """Identifiers of every record, in directory enumeration order"""
        if not self.directory.is_dir():
            return []
        return [
            name[: -len(RECORD_SUFFIX)]
            for name in os.listdir(self.directory)
            if name.endswith(RECORD_SUFFIX) and not name.startswith(".")
        ]

    def read_all(self) -> list[dict]:
        """Every record document; files removed while listing are skipped"""
        documents = []
        for identifier in self.list_identifiers():
            try:
                documents.append(self.read(identifier))
            except FileNotFoundError:
                logger.debug(f"{self.label} {identifier} vanished while listing")
        return documents

    def new_identifier(self, max_attempts: int = 3) -> str:
        """
        Generate an identifier not used by any stored record.

        Raises:
            IdentifierConflictError: every candidate already existed
        """
        for attempt in range(1, max_attempts + 1):
            candidate = str(uuid.uuid4())
            if not self.exists(candidate):
                return candidate
            logger.warning(
                f"Generated {self.label} id {candidate} already exists "
                f"(attempt {attempt}/{max_attempts})"
            )
        raise IdentifierConflictError(
            f"Could not generate a unique {self.label} id after {max_attempts} attempts"
        )

    @contextmanager
    def lock(self, identifier: str) -> Iterator[None]:
        """
        Serialize read-modify-write on one record within this process.

        Entries live only while some caller holds or waits for the lock.
        """
        with self._locks_guard:
            entry = self._locks.get(identifier)
            if entry is None:
                entry = self._locks[identifier] = [threading.Lock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[identifier]
