from pathlib import Path

import pytest

FULL_FRONTMATTER = """---
title: Test chat
system: be terse
model: gpt-x
api_endpoint: https://api.example.com/v1/chat/completions
created_at: 2024-01-01T00:00:00+00:00
updated_at: 2024-01-01T00:00:00+00:00
tags: []
summary:
---
"""


class MemoryFileSystem:
    """In-memory stand-in for the filesystem collaborator."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = {Path(k): v for k, v in (files or {}).items()}
        self.reads: list[Path] = []

    def read_text(self, path: Path) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(2, "No such file", str(path))

    def exists(self, path: Path) -> bool:
        return path in self.files


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def write_chat(tmp_path: Path):
    """Write a chat file with a complete frontmatter block and return its path."""

    def _write(body: str, name: str = "chat.md", frontmatter: str = FULL_FRONTMATTER) -> Path:
        path = tmp_path / name
        path.write_text(frontmatter + body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def full_frontmatter() -> str:
    return FULL_FRONTMATTER
