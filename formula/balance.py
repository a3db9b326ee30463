# formula/balance.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Parenthesis balance validation for formula fragments

from typing import Optional

from .exceptions import UnmatchedClose, UnmatchedOpen
from .glyphs import CLOSE_GROUP, OPEN_GROUP


def check_balance(text: str, start: int = 0, end: Optional[int] = None) -> None:
    """Validate parenthesis nesting of ``text[start:end]``.

    Depth starts at zero, every opening parenthesis increments it and every
    closing one decrements it. Returns silently when the fragment is balanced.

    Args:
        text: Source string holding the fragment
        start: Index of the first character of the fragment
        end: Index one past the last character (defaults to ``len(text)``)

    Raises:
        UnmatchedClose: Depth would drop below zero; ``position`` is the
            index of the offending closing parenthesis
        UnmatchedOpen: Depth is not zero once the fragment is exhausted
    """
    if end is None:
        end = len(text)

    depth = 0
    last_open = start
    for index in range(start, end):
        char = text[index]
        if char == OPEN_GROUP:
            depth += 1
            last_open = index
        elif char == CLOSE_GROUP:
            if depth == 0:
                raise UnmatchedClose(
                    f"Unmatched '{CLOSE_GROUP}' at position {index}", index
                )
            depth -= 1

    if depth != 0:
        raise UnmatchedOpen(
            f"{depth} unclosed '{OPEN_GROUP}' (last opened at position {last_open})",
            last_open,
        )
