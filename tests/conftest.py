# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - storage_dir      → temporary directory for the metadata file
# - store_file       → MetadataFile inside storage_dir
# - store            → empty MetadataStore
# - panel            → RecordingPanel (remembers every update)
# - notifier         → RecordingNotifier (remembers every message)
# - prompt           → ScriptedPrompt (answers from a queue)
# - assistant        → activated FileAssistant wired to all of the above
# - active_file      → path of a fake "open" file
#
# ==============================================

import pytest

from file_assistant.assistant import FileAssistant
from file_assistant.config import AppConfig, StorageConfig
from file_assistant.persistence.metadata_file import MetadataFile
from file_assistant.store.metadata_store import MetadataStore


class RecordingPanel:
    """Panel that keeps (path, notes, todo dicts) for every update."""

    def __init__(self):
        self.updates = []

    def update(self, path, record):
        self.updates.append((path, list(record.notes), [t.to_dict() for t in record.todos]))

    @property
    def last(self):
        return self.updates[-1] if self.updates else None


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def info(self, message):
        self.messages.append(("info", message))

    def warning(self, message):
        self.messages.append(("warning", message))

    def error(self, message):
        self.messages.append(("error", message))

    def of_level(self, level):
        return [text for kind, text in self.messages if kind == level]


class ScriptedPrompt:
    """Returns queued answers in order; None once the queue is empty."""

    def __init__(self):
        self.answers = []
        self.calls = []

    def __call__(self, message, placeholder):
        self.calls.append((message, placeholder))
        if self.answers:
            return self.answers.pop(0)
        return None


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "storage"


@pytest.fixture
def store_file(storage_dir):
    return MetadataFile(storage_dir)


@pytest.fixture
def store():
    return MetadataStore()


@pytest.fixture
def panel():
    return RecordingPanel()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def prompt():
    return ScriptedPrompt()


@pytest.fixture
def config(storage_dir):
    return AppConfig(storage=StorageConfig(storage_dir=str(storage_dir)))


@pytest.fixture
def active_file(tmp_path):
    return str(tmp_path / "project" / "auth.py")


@pytest.fixture
def assistant(config, store_file, panel, prompt, notifier):
    instance = FileAssistant(
        config=config,
        store_file=store_file,
        panel=panel,
        prompt=prompt,
        notifier=notifier
    )
    instance.activate()
    return instance
