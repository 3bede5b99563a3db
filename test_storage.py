"""
Tests for key-value storage.
"""
import tempfile
from pathlib import Path

import pytest

from scavenger_hunt.config.settings import Config
from scavenger_hunt.core.state_manager import HuntStateManager
from scavenger_hunt.storage.key_value import FileStore, MemoryStore
from test_state import make_image_bytes


def test_memory_store():
    """Test the in-memory store."""
    print("=== Testing Memory Store ===")

    store = MemoryStore()
    assert store.get("missing") is None

    store.set("a", b"1")
    store.set("a", b"2")
    assert store.get("a") == b"2"
    assert store.write_count == 2
    assert store.keys() == ["a"]


def test_file_store():
    """Test the file-backed store."""
    print("=== Testing File Store ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        store = FileStore(Path(temp_dir) / "store")
        assert store.get("ScavengerHunt.Items.v1") is None

        store.set("ScavengerHunt.Items.v1", b"[]")
        path = store.path_for("ScavengerHunt.Items.v1")
        print(f"✅ Saved to {path}")

        assert path.name == "ScavengerHunt.Items.v1.json"
        assert store.get("ScavengerHunt.Items.v1") == b"[]"

        store.set("ScavengerHunt.Items.v1", b"[1]")
        assert FileStore(Path(temp_dir) / "store").get("ScavengerHunt.Items.v1") == b"[1]"

        # No temp files left behind
        assert [p.name for p in path.parent.iterdir()] == [path.name]


def test_file_store_key_sanitizing():
    with tempfile.TemporaryDirectory() as temp_dir:
        store = FileStore(Path(temp_dir))
        path = store.path_for("../escape/key")

        assert path.parent == Path(temp_dir)
        assert "/" not in path.name

        with pytest.raises(ValueError):
            store.path_for("")


def test_state_survives_restart_on_disk():
    """Test hunt progress persists through a file store."""
    print("=== Testing On-Disk Persistence ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        store_dir = Path(temp_dir) / "store"

        first = HuntStateManager(store=FileStore(store_dir), config=Config())
        first.initialize()
        target = first.items[6]
        first.mark_found(target.id, make_image_bytes())

        second = HuntStateManager(store=FileStore(store_dir), config=Config())
        second.initialize()

        assert [i.model_dump() for i in second.items] == [i.model_dump() for i in first.items]
        assert second.get_item(target.id).found


def test_file_store_failed_write_cleans_up(monkeypatch):
    """Test a failing replace leaves the old value and no temp files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        store = FileStore(Path(temp_dir))
        store.set("key", b"old")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("scavenger_hunt.storage.key_value.os.replace", broken_replace)

        with pytest.raises(OSError):
            store.set("key", b"new")

        monkeypatch.undo()
        assert store.get("key") == b"old"
        assert [p.name for p in Path(temp_dir).iterdir()] == ["key.json"]
