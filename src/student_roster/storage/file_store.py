from __future__ import annotations

import logging
import os
import re
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Optional

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


@contextmanager
def atomic_writer(path: Path) -> Iterator[IO[str]]:
    """Write to a temp file next to ``path`` and move it into place on success."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as fh:
            yield fh
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except Exception:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class FileSlotStore:
    """Slot store backed by a directory: slot ``key`` lives in ``<root>/<key>.json``.

    Bytes that are not valid UTF-8 are carried through as surrogate escapes, so a
    damaged file reads without error and writes back byte for byte.
    """

    def __init__(self, root: str | os.PathLike):
        self._root = Path(root)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key) or key.startswith("."):
            raise StorageError(f"Invalid slot key: {key!r}")
        return self._root / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Cannot read slot {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            with atomic_writer(path) as fh:
                fh.write(value)
        except OSError as e:
            raise StorageError(f"Cannot write slot {key!r}: {e}") from e
        logger.debug("Wrote slot %s (%d bytes)", key, len(value))

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError(f"Cannot remove slot {key!r}: {e}") from e
