# src/samvada/chat/lines.py

from collections.abc import Iterator


class LineSource:
    """Restartable cursor over the lines of a text buffer.

    Iterating consumes lines; a second consumer picks up where the first
    one stopped.
    """

    def __init__(self, text: str) -> None:
        self._lines = text.splitlines()
        self._position = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._position >= len(self._lines):
            raise StopIteration
        line = self._lines[self._position]
        self._position += 1
        return line

    @property
    def position(self) -> int:
        """Number of lines consumed so far."""
        return self._position

    def remaining(self) -> list[str]:
        return self._lines[self._position :]

    def restart(self) -> None:
        self._position = 0
