"""Shared test fixtures for jotbook."""

import os
import tempfile
from datetime import UTC, datetime, timedelta

import pytest

from jotbook.core.storage import MemoryStorage
from jotbook.journal.store import EntryStore


class FakeClock:
    """Returns ISO timestamps one minute apart, starting at ``start``."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)):
        self.current = start

    def __call__(self) -> str:
        value = self.current.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        self.current += timedelta(minutes=1)
        return value


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "storage_dir": os.path.join(tmp_dir, "data", "storage"),
        },
        "view": {"sort_order": "asc"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage, clock):
    s = EntryStore(storage, clock=clock)
    s.load()
    return s
