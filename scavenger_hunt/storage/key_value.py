"""
Key-value stores the hunt state is persisted through.

The state manager only needs get/set of byte strings by key, so anything
providing those two methods can back it.
"""
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol


class KeyValueStore(Protocol):
    """Byte-string storage addressed by key."""

    def get(self, key: str) -> Optional[bytes]:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...


class MemoryStore:
    """Dict-backed store, used in tests and for throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})
        self.write_count = 0

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)
        self.write_count += 1

    def keys(self):
        return list(self._data)


class FileStore:
    """Stores each key in its own file under ``data_dir``."""

    _UNSAFE_CHARS = re.compile(r'[^A-Za-z0-9._-]')

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        """Get the file path a key is stored at."""
        if not key:
            raise ValueError("Store key must not be empty")
        return self.data_dir / f"{self._UNSAFE_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        # Write to a sibling temp file so a crash never leaves a half-written value
        tmp = tempfile.NamedTemporaryFile('wb', dir=self.data_dir, prefix=path.name, suffix=".tmp", delete=False)
        try:
            with tmp:
                tmp.write(value)
            os.replace(tmp.name, path)
        except OSError:
            if os.path.exists(tmp.name):
                os.remove(tmp.name)
            raise
