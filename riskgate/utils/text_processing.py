"""Text processing utilities."""

from collections.abc import Iterable


def first_contained(text: str, tokens: Iterable[str]) -> str | None:
    """
    Return the first token that occurs as a substring of text.

    Args:
        text: Text to scan (already lowercased by the caller)
        tokens: Candidate tokens, checked in order

    Returns:
        The first matching token, or None
    """
    for token in tokens:
        if token in text:
            return token
    return None


def find_occurrences(text: str, token: str) -> list[int]:
    """
    Find every start index of token in text, overlapping matches included.

    Args:
        text: Text to scan
        token: Non-empty substring to look for

    Returns:
        Sorted list of start indices
    """
    positions: list[int] = []
    start = text.find(token)
    while start != -1:
        positions.append(start)
        start = text.find(token, start + 1)
    return positions
