"""Bracket problems: validity, depth, repairs, matching and longest valid runs."""

from __future__ import annotations

from collections.abc import Iterable

_PAIRS = {")": "(", "]": "[", "}": "{"}


def _scan(chars: Iterable[str], forward: bool) -> int:
    left = right = best = 0
    for c in chars:
        if c == "(":
            left += 1
        else:
            right += 1
        if left == right:
            best = max(best, 2 * left)
        elif (right > left) if forward else (left > right):
            left = right = 0
    return best


def longest_valid_scan(s: str) -> int:
    """Length of the longest valid parenthesised substring, by a scan each way.

    Every character other than '(' counts as ')'.
    """
    return max(_scan(s, True), _scan(reversed(s), False))


def max_depth(s: str) -> int:
    """Deepest nesting of parentheses in s; other characters are ignored."""
    depth = best = 0
    for c in s:
        if c == "(":
            depth += 1
            best = max(best, depth)
        elif c == ")":
            depth -= 1
    return best


def min_add_to_make_valid(s: str) -> int:
    """Fewest parentheses to insert so s becomes valid; non-'(' counts as ')'."""
    need_right = add_left = 0
    for c in s:
        if c == "(":
            need_right += 1
        elif need_right > 0:
            need_right -= 1
        else:
            add_left += 1
    return add_left + need_right


def min_remove_to_make_valid(s: str) -> str:
    """s with the fewest parentheses removed so that it is valid.

    Unmatched ')' are dropped left to right, then surplus '(' from the right.
    """
    kept: list[str] = []
    balance = 0
    for c in s:
        if c == "(":
            balance += 1
        elif c == ")":
            if balance == 0:
                continue
            balance -= 1
        kept.append(c)
    result: list[str] = []
    for c in reversed(kept):
        if c == "(" and balance > 0:
            balance -= 1
            continue
        result.append(c)
    return "".join(reversed(result))


def longest_valid_subsequence(s: str) -> int:
    """Length of the longest valid, not necessarily contiguous, subsequence."""
    left = pairs = 0
    for c in s:
        if c == "(":
            left += 1
        elif c == ")" and left > 0:
            left -= 1
            pairs += 1
    return 2 * pairs


def check_valid_with_stars(s: str) -> bool:
    """Whether s can be valid when each other character may be '(', ')' or nothing."""
    low = high = 0
    for c in s:
        if c == "(":
            low += 1
            high += 1
        elif c == ")":
            low -= 1
            high -= 1
        else:
            low -= 1
            high += 1
        if high < 0:
            return False
        low = max(low, 0)
    return low == 0


def is_valid_single(s: str) -> bool:
    """Whether the round parentheses in s balance; other characters are ignored."""
    balance = 0
    for c in s:
        if c == "(":
            balance += 1
        elif c == ")":
            balance -= 1
        if balance < 0:
            return False
    return balance == 0


def is_valid(s: str) -> bool:
    """Whether s is a well-nested string of (), [] and {}; anything else is invalid."""
    stack: list[str] = []
    for c in s:
        if c in "([{":
            stack.append(c)
        elif not stack or stack[-1] != _PAIRS.get(c):
            return False
        else:
            stack.pop()
    return not stack


def longest_valid_stack(s: str) -> int:
    """Longest valid parenthesised substring, using a stack of indices."""
    stack = [-1]
    best = 0
    for i, c in enumerate(s):
        if c == "(":
            stack.append(i)
            continue
        stack.pop()
        if stack:
            best = max(best, i - stack[-1])
        else:
            stack.append(i)
    return best


def longest_valid_dp(s: str) -> int:
    """Longest valid parenthesised substring, by the length ending at each index."""
    ending = [0] * len(s)
    best = 0
    for i in range(1, len(s)):
        if s[i] == "(":
            continue
        if s[i - 1] == "(":
            ending[i] = (ending[i - 2] if i >= 2 else 0) + 2
        else:
            j = i - ending[i - 1] - 1
            if j < 0 or s[j] == ")":
                continue
            ending[i] = ending[i - 1] + 2 + (ending[j - 1] if j >= 1 else 0)
        best = max(best, ending[i])
    return best


def match_parentheses(s: str) -> list[int]:
    """For each index, the index of its matching parenthesis, or -1.

    Raises ValueError on a ')' with no '(' to match.
    """
    match = [-1] * len(s)
    opens: list[int] = []
    for i, c in enumerate(s):
        if c == "(":
            opens.append(i)
        elif c == ")":
            if not opens:
                raise ValueError(f"unmatched ')' at index {i}")
            j = opens.pop()
            match[i] = j
            match[j] = i
    return match