"""Tokenizing helpers used by the query engine and the lineup parser."""

from __future__ import annotations


def split(target: str, separator: str) -> list[str]:
    """Split ``target`` on every literal occurrence of ``separator``.

    The first token is always kept, even when empty, so ``split(line, "#")[0]``
    is the text before a comment.  Every later empty token is dropped, which
    collapses runs of separators.

    Examples:
        >>> split("#comment", "#")
        ['', 'comment']
        >>> split("a1,,w2,", ",")
        ['a1', 'w2']
        >>> split(" quest3-1", " ")
        ['', 'quest3-1']

    Raises:
        ValueError: If ``separator`` is empty
    """
    if not separator:
        raise ValueError("separator must not be empty")

    head, *rest = target.split(separator)
    return [head, *(token for token in rest if token)]


def to_lower(text: str) -> str:
    """Lower-case ``text`` before it is compared against reserved tokens."""
    return text.lower()
