"""Bracket matching checks built on a stack."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(text: str) -> bool:
    """True if every bracket in ``text`` closes in order.

    Any character that is not an opening bracket must close the most
    recent unmatched one, so other characters make the text unbalanced.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def is_valid_parentheses(text: str) -> bool:
    """True if the brackets ``()[]{}`` in ``text`` are properly nested.

    A character that is not a bracket consumes the most recent open bracket.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif not stack:
            return False
        else:
            expected = _PAIRS.get(char)
            if expected is not None and expected != stack[-1]:
                return False
            stack.pop()
    return not stack


def longest_valid_parentheses(text: str) -> int:
    """Length of the longest well-formed run of ``(`` and ``)``.

    Every character other than ``(`` is treated as a closing parenthesis.
    """
    stack = [-1]
    best = 0
    for i, char in enumerate(text):
        if char == "(":
            stack.append(i)
            continue
        stack.pop()
        if stack:
            best = max(best, i - stack[-1])
        else:
            stack.append(i)
    return best