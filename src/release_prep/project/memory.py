"""In-memory collaborators, used for dry runs and in tests."""

from __future__ import annotations


class MemoryVersionStore:
    def __init__(self, version: str, name: str = "<memory>") -> None:
        self.version = version
        self.name = name
        self.writes: list[str] = []

    def read_version(self) -> str:
        return self.version

    def write_version(self, version: str) -> None:
        self.version = version
        self.writes.append(version)


class MemoryChangelog:
    def __init__(self, text: str = "") -> None:
        self.text = text

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.text = text


class MemoryNotes:
    def __init__(self) -> None:
        self.text: str | None = None

    def write(self, text: str) -> None:
        self.text = text


class MemoryEnv:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def write(self, key: str, value: str) -> None:
        self.values[key] = value
