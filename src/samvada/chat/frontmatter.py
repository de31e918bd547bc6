# src/samvada/chat/frontmatter.py

import logging
import re
from collections.abc import Iterable, Mapping

from .constants import FRONTMATTER_DELIMITER, FRONTMATTER_TEMPLATE

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(\w+)(\??)\}")


def parse_frontmatter(
    lines: Iterable[str],
    defaults: Mapping[str, str] | None = None,
) -> tuple[dict[str, str], bool]:
    """Read the `---` delimited key/value block at the top of a document.

    Consumes lines up to and including the closing delimiter, so the same
    iterator can be handed to the message parser afterwards. A block that
    is never closed consumes every line.

    Args:
        lines: Line iterator positioned at the start of the document.
        defaults: Values to start from. Only keys found in the block
            overwrite them.

    Returns:
        The field map and whether a frontmatter block was opened.
    """
    fields: dict[str, str] = dict(defaults or {})
    opened = False
    current_key: str | None = None
    current_value = ""

    for line in lines:
        if line.strip() == FRONTMATTER_DELIMITER:
            if opened:
                break
            opened = True
            continue

        if not opened:
            continue

        if ":" in line:
            if current_key is not None:
                fields[current_key] = current_value.strip()
            key, value = line.split(":", 1)
            current_key = key.strip()
            current_value = value.strip()
        elif current_key is not None:
            current_value += "\n" + line.strip()

    if current_key is not None:
        fields[current_key] = current_value.strip()

    logger.debug("Parsed frontmatter keys: %s", list(fields))
    return fields, opened


def template_keys(template: str = FRONTMATTER_TEMPLATE) -> list[str]:
    """Return every placeholder key named in the template, in order."""
    return [match.group(1) for match in _PLACEHOLDER.finditer(template)]


def required_keys(template: str = FRONTMATTER_TEMPLATE) -> list[str]:
    """Return the placeholder keys that must carry a value."""
    return [
        match.group(1)
        for match in _PLACEHOLDER.finditer(template)
        if not match.group(2)
    ]


def render_frontmatter(
    fields: Mapping[str, str],
    template: str = FRONTMATTER_TEMPLATE,
) -> str:
    """Fill the template placeholders from `fields`. Missing keys render empty."""
    return _PLACEHOLDER.sub(lambda match: fields.get(match.group(1), ""), template)
