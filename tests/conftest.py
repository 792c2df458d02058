"""Global pytest configuration."""

import logging
import os
from pathlib import Path

import pytest

from safename.config.settings import reset_settings


class MemoryDirectory:
    """Directory probe over a fixed set of names, recording every probe."""

    def __init__(self, names: set[str] | None = None):
        self.names = set(names or [])
        self.probes: list[tuple[Path, str]] = []

    def exists(self, directory: Path, name: str) -> bool:
        self.probes.append((directory, name))
        return name in self.names


class FullDirectory:
    """Directory probe that reports every name as taken."""

    def __init__(self):
        self.calls = 0

    def exists(self, directory: Path, name: str) -> bool:
        self.calls += 1
        return True


class FailingDirectory:
    """Directory probe whose backing store is unreadable."""

    def exists(self, directory: Path, name: str) -> bool:
        raise PermissionError(13, "Permission denied", str(directory))


def touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).touch()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from SAFENAME_* variables, cached settings and CLI logging."""
    for key in list(os.environ):
        if key.startswith("SAFENAME_"):
            monkeypatch.delenv(key)
    reset_settings()

    yield

    reset_settings()
    logger = logging.getLogger("safename")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
