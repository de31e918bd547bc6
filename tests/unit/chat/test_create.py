from datetime import datetime, timezone
from pathlib import Path

import pytest

from samvada.chat.create import create_chat, new_document_text
from samvada.chat.lint import validate_file
from samvada.chat.parser import parse_file
from samvada.config.settings import AppConfig


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        system_prompt="You are a helpful assistant.",
        model="gpt-x",
        api_endpoint="https://api.example.com/v1/chat/completions",
    )


NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


class TestCreateChat:
    def test_writes_rendered_template(self, tmp_path: Path, config: AppConfig) -> None:
        path = create_chat("ideas", tmp_path, config=config, now=NOW)

        assert path == tmp_path / "ideas.md"
        assert path.read_text(encoding="utf-8") == (
            "---\n"
            "title: ideas\n"
            "system: You are a helpful assistant.\n"
            "model: gpt-x\n"
            "api_endpoint: https://api.example.com/v1/chat/completions\n"
            "created_at: 2024-05-01T12:30:00+00:00\n"
            "updated_at: 2024-05-01T12:30:00+00:00\n"
            "tags: []\n"
            "summary: \n"
            "---\n"
            "\n"
            "user:\n"
        )

    def test_created_document_passes_lint(self, tmp_path: Path, config: AppConfig) -> None:
        path = create_chat("ideas", tmp_path, config=config)

        assert validate_file(path) == []

    def test_created_document_parses(self, tmp_path: Path, config: AppConfig) -> None:
        document = parse_file(create_chat("ideas", tmp_path, config=config, now=NOW))

        assert document.frontmatter["title"] == "ideas"
        assert document.model == "gpt-x"
        assert document.frontmatter["summary"] == ""
        assert len(document.turns) == 1

    def test_refuses_to_overwrite(self, tmp_path: Path, config: AppConfig) -> None:
        create_chat("ideas", tmp_path, config=config)

        with pytest.raises(FileExistsError):
            create_chat("ideas", tmp_path, config=config)

    def test_missing_directory(self, tmp_path: Path, config: AppConfig) -> None:
        with pytest.raises(NotADirectoryError):
            create_chat("ideas", tmp_path / "nope", config=config)

    def test_defaults_to_working_directory(
        self, tmp_path: Path, config: AppConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        path = create_chat("here", config=config)

        assert (tmp_path / "here.md").is_file()
        assert path == Path(".") / "here.md"

    def test_without_open_turn(self, config: AppConfig) -> None:
        text = new_document_text("t", config, now=NOW, open_turn=False)

        assert text.endswith("summary: \n---\n")
