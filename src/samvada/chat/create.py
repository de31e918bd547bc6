# src/samvada/chat/create.py

import logging
from datetime import datetime, timezone
from pathlib import Path

from samvada.config.settings import AppConfig

from .constants import FRONTMATTER_TEMPLATE, USER_PREFIX
from .frontmatter import render_frontmatter

logger = logging.getLogger(__name__)


def new_document_text(
    title: str,
    config: AppConfig,
    now: datetime | None = None,
    open_turn: bool = True,
) -> str:
    """Text of a fresh chat document, by default ending with an open user turn."""
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    frontmatter = render_frontmatter(
        {
            "title": title,
            "system": config.system_prompt,
            "model": config.model,
            "api_endpoint": config.api_endpoint,
            "created_at": timestamp,
            "updated_at": timestamp,
            "tags": "[]",
            "summary": "",
        },
        FRONTMATTER_TEMPLATE,
    )
    if not open_turn:
        return f"{frontmatter}\n"
    return f"{frontmatter}\n\n{USER_PREFIX}\n"


def create_chat(
    name: str,
    directory: str | Path | None = None,
    *,
    config: AppConfig,
    now: datetime | None = None,
    open_turn: bool = True,
) -> Path:
    """Create `<directory>/<name>.md` from the frontmatter template.

    Raises:
        NotADirectoryError: `directory` does not exist.
        FileExistsError: The chat file already exists.
    """
    directory = Path(directory) if directory is not None else Path(".")
    if not directory.is_dir():
        raise NotADirectoryError(f"Directory does not exist: {directory}")

    file_path = directory / f"{name}.md"
    with open(file_path, "x", encoding="utf-8") as f:
        f.write(new_document_text(name, config, now, open_turn))

    logger.info("Created chat file: %s", file_path)
    return file_path
