"""Operations on strings of balanced parentheses."""

from __future__ import annotations


def remove_outer_parentheses(text: str) -> str:
    """Strip the outermost pair from every primitive group of a parentheses string.

    Raises ValueError on any character other than '(' and ')'.
    """
    kept: list[str] = []
    depth = 0
    for char in text:
        if char == "(":
            if depth > 0:
                kept.append(char)
            depth += 1
        elif char == ")":
            depth -= 1
            if depth > 0:
                kept.append(char)
        else:
            raise ValueError(f"unexpected character {char!r} in parentheses string")
    return "".join(kept)