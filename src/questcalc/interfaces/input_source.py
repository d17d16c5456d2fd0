"""Input Source Protocol Interface.

This module defines the protocol for line sources consumed by the
resilient query engine.
"""

from typing import Protocol


class IInputSource(Protocol):
    """Protocol for anything that can supply the next line of user input.

    ``scripted`` sources replay recorded commands and may run out; ``echo``
    tells the query engine whether consumed lines should be shown.
    """

    echo: bool
    scripted: bool

    def next_line(self) -> str | None:
        """Return the next input line without its newline.

        Returns:
            The line, or ``None`` once a scripted source is exhausted
        """
        ...
