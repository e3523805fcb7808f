from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from campaign_api import config as core_config  # noqa: E402
from campaign_api.storage import coordinator as coordinator_module  # noqa: E402
from campaign_api.storage.persistence import DocumentStore  # noqa: E402


class CountingStore(DocumentStore):
    """DocumentStore that counts disk accesses."""

    def __init__(self, path):
        super().__init__(path)
        self.loads = 0
        self.saves = 0

    def load(self):
        self.loads += 1
        return super().load()

    def save(self, document):
        self.saves += 1
        return super().save(document)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def write_document(path: Path, document) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")


def read_document(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def data_file(tmp_path) -> Path:
    return tmp_path / "data" / "campaignData.json"


@pytest.fixture()
def store(data_file) -> CountingStore:
    return CountingStore(data_file)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def api_env(tmp_path, monkeypatch):
    """Point settings at a temporary data dir and reset cached singletons."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("DATA_DIR", str(data_dir))
    monkeypatch.setenv("DATA_FILE", "campaignData.json")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "300")
    core_config.get_settings.cache_clear()
    coordinator_module.get_coordinator.cache_clear()

    yield data_dir / "campaignData.json"

    core_config.get_settings.cache_clear()
    coordinator_module.get_coordinator.cache_clear()
