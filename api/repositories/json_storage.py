"""
JSON-file persistence: one file per collection, each holding a JSON array.

Every operation reads and rewrites the whole document. Services wrap their
load -> mutate -> save cycle in ``store.locked()`` so concurrent requests in
this process cannot lose each other's writes.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator
import json
import logging
import os
import stat
import tempfile
import threading

from api.core.errors import CollectionReadError

logger = logging.getLogger(__name__)


class CollectionStore:
    """Load/save a named collection (list of records) backed by a single file."""

    def __init__(self, path: Path | str, *, fail_open: bool = True, atomic: bool = True) -> None:
        self.path = Path(path)
        self.fail_open = fail_open
        self.atomic = atomic
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self.path.stem

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def load(self) -> list:
        if not self.path.exists():
            logger.warning("Collection file %s is missing; treating it as empty", self.path)
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            return self._read_failed(f"Error reading {self.path}: {exc}")
        if not isinstance(data, list):
            return self._read_failed(f"Error reading {self.path}: expected a JSON array")
        return data

    def _read_failed(self, message: str) -> list:
        if not self.fail_open:
            logger.error(message)
            raise CollectionReadError(f"No se pudo leer la coleccion {self.name}")
        logger.error("%s; serving an empty collection", message)
        return []

    def save(self, records: list[Any]) -> bool:
        try:
            payload = json.dumps(records, ensure_ascii=False, indent=2)
            if self.atomic:
                self._replace(payload)
            else:
                self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error writing %s: %s", self.path, exc)
            return False
        return True

    def _replace(self, payload: str) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp creates 0600 files; keep the mode the collection had.
            os.chmod(tmp_name, self._target_mode())
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def ensure(self, seed: list[Any]) -> bool:
        """Write ``seed`` when the file does not exist yet. Returns True if created."""
        with self._lock:
            if self.path.exists():
                return False
            if not self.save(list(seed)):
                raise OSError(f"Could not create {self.path}")
            return True
