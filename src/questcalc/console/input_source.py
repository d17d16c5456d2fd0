"""Terminal and macro-file backed input sources."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path


class InteractiveSource:
    """Reads lines typed by the user.

    The user already sees what they type, so nothing is echoed.  ``EOFError``
    from the reader (closed stdin) propagates to the caller.
    """

    scripted = False

    def __init__(self, reader: Callable[[], str] = input) -> None:
        self._reader = reader
        self.echo = False

    def next_line(self) -> str:
        return self._reader()


class ScriptedSource:
    """Replays recorded command lines, then reports exhaustion with ``None``."""

    scripted = True

    def __init__(self, lines: Iterable[str], *, echo: bool = True) -> None:
        self._lines = [line.rstrip("\r\n") for line in lines]
        self._position = 0
        self.echo = echo

    @classmethod
    def from_file(cls, path: Path | str, *, echo: bool = True) -> ScriptedSource:
        """Load a macro file.

        Undecodable bytes become U+FFFD, so such lines simply fail validation.
        Raises ``OSError`` if the file cannot be read.
        """

        text = Path(path).read_text(encoding="utf-8", errors="replace")
        return cls(text.splitlines(), echo=echo)

    @classmethod
    def from_text(cls, text: str, *, echo: bool = True) -> ScriptedSource:
        return cls(text.splitlines(), echo=echo)

    def next_line(self) -> str | None:
        if self._position >= len(self._lines):
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._position
