# File: tests/conftest.py

import threading
from pathlib import Path

import pytest
from PIL import Image
from sqlalchemy import text

from stitcher.core.database.connection import create_session_factory
from stitcher.core.jobs.data.repository import SqlJobRepository
from stitcher.core.jobs.service.manager import JobManager
from stitcher.core.common.errors import JobExecutionError


@pytest.fixture(scope="function")
def session_factory():
    """
    Fresh in-memory ledger for every test.
    """
    factory = create_session_factory("sqlite://")
    yield factory
    factory.kw["bind"].dispose()


@pytest.fixture(scope="function")
def job_repo(session_factory):
    return SqlJobRepository(session_factory)


@pytest.fixture(scope="function")
def job_manager(job_repo):
    return JobManager(job_repo)


@pytest.fixture
def make_image():
    """
    Writes a small solid-colour image and returns its path.
    The format follows the file extension.
    """
    def _make(path: Path, size=(4, 3), color=(255, 0, 0)) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = "RGBA" if len(color) == 4 else "RGB"
        Image.new(mode, size, color).save(path)
        return path

    return _make


class FakeStitchBackend:
    """
    Backend double: records the order it was called with and writes the
    joined input names instead of pixels. Inputs named in fail_on raise.
    """

    def __init__(self, fail_on=(), block_event=None, started_event=None):
        self.fail_on = set(fail_on)
        self.block_event = block_event
        self.started_event = started_event
        self.calls = []
        self._lock = threading.Lock()

    def stitch(self, paths, direction):
        with self._lock:
            self.calls.append(([p.name for p in paths], direction))
        if self.started_event is not None:
            self.started_event.set()
        if self.block_event is not None:
            self.block_event.wait(timeout=5)

        broken = [p.name for p in paths if p.name in self.fail_on]
        if broken:
            raise JobExecutionError(f"Could not read image {broken[0]}")
        return "|".join(p.name for p in paths).encode()

    def write_atomically(self, path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)


@pytest.fixture
def fake_backend():
    return FakeStitchBackend


@pytest.fixture
def db_ping(session_factory):
    """Runs SELECT 1 through the ledger session factory."""
    def _ping() -> int:
        with session_factory() as db:
            return db.execute(text("SELECT 1")).scalar()
    return _ping
