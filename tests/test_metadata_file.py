# ==============================================
# Tests for MetadataFile (whole-store JSON persistence)
# ==============================================

import json

from file_assistant.persistence.metadata_file import MetadataFile
from file_assistant.store.metadata_store import MetadataStore


class TestLoad:
    def test_missing_file_gives_empty_store(self, store_file):
        store = store_file.load()
        assert len(store) == 0

    def test_load_creates_storage_dir(self, store_file, storage_dir):
        assert not storage_dir.exists()
        store_file.load()
        assert storage_dir.is_dir()

    def test_reads_original_format(self, store_file, storage_dir):
        storage_dir.mkdir(parents=True)
        (storage_dir / "fileMetadata.json").write_text(json.dumps({
            "/repo/a.ts": {
                "notes": ["entry point"],
                "todos": [{"id": 1, "text": "split file", "completed": True,
                           "createdAt": "2024-03-02T08:00:00.000Z"}]
            }
        }), encoding="utf-8")

        store = store_file.load()

        record = store.get_or_create("/repo/a.ts")
        assert record.notes == ["entry point"]
        assert record.todos[0].completed is True
        assert record.todos[0].created_at == "2024-03-02T08:00:00.000Z"
        assert store.add_todo("/repo/a.ts", "next").id == 2

    def test_invalid_json_gives_empty_store(self, store_file, storage_dir, capsys):
        storage_dir.mkdir(parents=True)
        (storage_dir / "fileMetadata.json").write_text("{not json", encoding="utf-8")

        store = store_file.load()

        assert len(store) == 0
        assert "Could not load metadata" in capsys.readouterr().out

    def test_wrong_shape_gives_empty_store(self, store_file, storage_dir):
        storage_dir.mkdir(parents=True)
        (storage_dir / "fileMetadata.json").write_text('["a", "b"]', encoding="utf-8")

        assert len(store_file.load()) == 0

    def test_deeply_nested_document_gives_empty_store(self, store_file, storage_dir, capsys):
        storage_dir.mkdir(parents=True)
        depth = 200000
        (storage_dir / "fileMetadata.json").write_text("[" * depth + "]" * depth, encoding="utf-8")

        store = store_file.load()

        assert len(store) == 0
        assert "Could not load metadata" in capsys.readouterr().out

    def test_wrongly_typed_fields_give_empty_store(self, store_file, storage_dir):
        storage_dir.mkdir(parents=True)
        (storage_dir / "fileMetadata.json").write_text(json.dumps({
            "/a": {"notes": [None], "todos": [{"id": 1, "text": "t", "completed": "false"}]}
        }), encoding="utf-8")

        assert len(store_file.load()) == 0

    def test_unusable_storage_dir_gives_empty_store(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")

        assert len(MetadataFile(blocker).load()) == 0


class TestSave:
    def test_round_trip(self, store_file):
        store = MetadataStore()
        store.add_note("/a.txt", "first")
        store.add_note("/a.txt", "second")
        store.add_todo("/a.txt", "x")
        store.add_todo("/a.txt", "y")
        store.toggle_todo("/a.txt", 1, True)
        store.add_todo("/b.txt", "z")

        result = store_file.save(store)
        loaded = store_file.load()

        assert result["status"] == "success"
        assert result["files"] == 2
        assert loaded == store
        assert loaded.get_or_create("/a.txt").notes == ["first", "second"]
        assert [t.text for t in loaded.get_or_create("/a.txt").todos] == ["x", "y"]

    def test_writes_indented_json(self, store_file):
        store = MetadataStore()
        store.add_note("/a.txt", "hello")
        store_file.save(store)

        text = store_file.metadata_path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "/a.txt"')
        assert json.loads(text)["/a.txt"]["notes"] == ["hello"]

    def test_non_ascii_text_preserved(self, store_file):
        store = MetadataStore()
        store.add_note("/a.txt", "überprüfen ✓")
        store_file.save(store)
        assert store_file.load().get_or_create("/a.txt").notes == ["überprüfen ✓"]

    def test_write_failure_reports_error(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        store = MetadataStore()
        store.add_note("/a.txt", "kept in memory")

        result = MetadataFile(blocker).save(store)

        assert result["status"] == "error"
        assert "Save failed" in result["error"]
        assert store.get_or_create("/a.txt").notes == ["kept in memory"]
        assert "Save failed" in capsys.readouterr().out

    def test_failed_serialization_keeps_previous_file(self, store_file, monkeypatch):
        store = MetadataStore()
        store.add_note("/a.txt", "on disk")
        store_file.save(store)
        before = store_file.metadata_path.read_text(encoding="utf-8")

        monkeypatch.setattr(store, "to_dict", lambda: {"/a.txt": object()})
        result = store_file.save(store)

        assert result["status"] == "error"
        assert store_file.metadata_path.read_text(encoding="utf-8") == before

    def test_custom_filename(self, storage_dir):
        store_file = MetadataFile(storage_dir, filename="notes.json")
        store_file.save(MetadataStore())
        assert (storage_dir / "notes.json").exists()


class TestUtilities:
    def test_exists_and_clear(self, store_file):
        assert not store_file.exists()
        store_file.save(MetadataStore())
        assert store_file.exists()

        store_file.clear()

        assert not store_file.exists()

    def test_clear_without_file(self, store_file):
        store_file.clear()
        assert not store_file.exists()
