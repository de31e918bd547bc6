# src/samvada/errors.py

from pathlib import Path


class ChatError(Exception):
    """Base class for errors raised by samvada."""


class FileReferenceError(ChatError):
    """A `[[path]]` reference could not be read.

    `placeholder` is the text inserted into the message in place of the
    file contents, so the failure stays visible in the transcript.
    """

    def __init__(
        self, raw_path: str, path: Path, cause: OSError | UnicodeDecodeError
    ) -> None:
        self.raw_path = raw_path
        self.path = path
        self.cause = cause
        self.placeholder = f"\n\nFailed to read file: {raw_path}\n\n"
        super().__init__(f"Failed to read file: {raw_path} ({cause})")


class MissingAPIKeyError(ChatError):
    """No API key was found in any of the supported locations."""


class ConfigError(ChatError):
    """The configuration file is unreadable or invalid."""
