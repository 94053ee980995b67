"""Dynamic programming on strings and sequences.

Covers edit distance, common subsequences and substrings, increasing subsequences,
palindromes, wildcard matching and digit translations.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from functools import cache


def edit_distance(word1: str, word2: str) -> int:
    """Fewest insertions, deletions and replacements turning word1 into word2."""
    m, n = len(word1), len(word2)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    table[0] = list(range(n + 1))
    for i in range(m + 1):
        table[i][0] = i
    for i, a in enumerate(word1, 1):
        for j, b in enumerate(word2, 1):
            if a == b:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = min(table[i - 1][j], table[i][j - 1], table[i - 1][j - 1]) + 1
    return table[m][n]


def edit_distance_compact(word1: str, word2: str) -> int:
    """Edit distance computed with a single row of the table."""
    row = list(range(len(word2) + 1))
    for i, a in enumerate(word1, 1):
        diagonal, row[0] = row[0], i
        for j, b in enumerate(word2, 1):
            above = row[j]
            row[j] = diagonal if a == b else min(above, row[j - 1], diagonal) + 1
            diagonal = above
    return row[-1]


def longest_common_subsequence(s1: str, s2: str) -> str:
    """One longest common subsequence of s1 and s2; empty when they share nothing."""
    m, n = len(s1), len(s2)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i, a in enumerate(s1, 1):
        for j, b in enumerate(s2, 1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    found: list[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            found.append(s1[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(found))


def longest_common_substring_length(s1: str, s2: str) -> int:
    """Length of the longest contiguous run shared by s1 and s2."""
    table = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    best = 0
    for i, a in enumerate(s1, 1):
        for j, b in enumerate(s2, 1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
                best = max(best, table[i][j])
    return best


def longest_common_substring(s1: str, s2: str) -> str:
    """The longest contiguous run shared by s1 and s2, earliest in s1 on ties."""
    n = len(s2)
    row = [0] * (n + 1)
    best = 0
    end = 0
    for i, a in enumerate(s1, 1):
        for j in range(n, 0, -1):
            if a == s2[j - 1]:
                row[j] = row[j - 1] + 1
                if row[j] > best:
                    best = row[j]
                    end = i
            else:
                row[j] = 0
    return s1[end - best:end]


def lis_length(a: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, in quadratic time."""
    ending: list[int] = []
    for x in a:
        ending.append(1 + max((size for prev, size in zip(a, ending) if prev < x), default=0))
    return max(ending, default=0)


def lnds_length(a: Sequence[int]) -> int:
    """Length of the longest non-decreasing subsequence, in quadratic time."""
    ending: list[int] = []
    for x in a:
        ending.append(1 + max((size for prev, size in zip(a, ending) if prev <= x), default=0))
    return max(ending, default=0)


def lis_length_fast(a: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, by binary search."""
    tails: list[int] = []
    for x in a:
        p = bisect_left(tails, x)
        if p == len(tails):
            tails.append(x)
        else:
            tails[p] = x
    return len(tails)


def lnds_length_fast(a: Sequence[int]) -> int:
    """Length of the longest non-decreasing subsequence, by binary search."""
    tails: list[int] = []
    for x in a:
        p = bisect_right(tails, x)
        if p == len(tails):
            tails.append(x)
        else:
            tails[p] = x
    return len(tails)


def longest_increasing_subsequence(a: Sequence[int]) -> list[int]:
    """One longest strictly increasing subsequence of a."""
    tails: list[int] = []
    tail_index: list[int] = []
    predecessor = [-1] * len(a)
    for i, x in enumerate(a):
        p = bisect_left(tails, x)
        if p == len(tails):
            tails.append(x)
            tail_index.append(i)
        else:
            tails[p] = x
            tail_index[p] = i
        if p > 0:
            predecessor[i] = tail_index[p - 1]

    result: list[int] = []
    cur = tail_index[-1] if tail_index else -1
    while cur != -1:
        result.append(a[cur])
        cur = predecessor[cur]
    result.reverse()
    return result


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring, by expanding around every centre."""
    n = len(s)
    if n < 2:
        return s
    start, best = 0, 1
    for center in range(n):
        for lo, hi in ((center, center), (center, center + 1)):
            while lo >= 0 and hi < n and s[lo] == s[hi]:
                if hi - lo + 1 > best:
                    start, best = lo, hi - lo + 1
                lo -= 1
                hi += 1
    return s[start:start + best]


def longest_palindrome_dp(s: str) -> str:
    """Longest palindromic substring, by a table over all intervals."""
    n = len(s)
    if n < 2:
        return s
    palindrome = [[False] * n for _ in range(n)]
    for i in range(n):
        palindrome[i][i] = True
    start, best = 0, 1
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            palindrome[i][j] = s[i] == s[j] and (length <= 3 or palindrome[i + 1][j - 1])
            if palindrome[i][j] and length > best:
                start, best = i, length
    return s[start:start + best]


def is_match(s: str, p: str) -> bool:
    """Whether the whole of s matches p, where '.' is any character and 'x*' repeats x.

    Raises ValueError when p starts with '*'.
    """
    if p.startswith("*"):
        raise ValueError("pattern cannot start with '*'")
    m, n = len(s), len(p)
    table = [[False] * (n + 1) for _ in range(m + 1)]
    table[0][0] = True
    for j in range(2, n + 1):
        if p[j - 1] == "*":
            table[0][j] = table[0][j - 2]

    def fits(char: str, token: str) -> bool:
        return token == "." or char == token

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if p[j - 1] != "*":
                table[i][j] = table[i - 1][j - 1] and fits(s[i - 1], p[j - 1])
            else:
                table[i][j] = table[i][j - 2] or (
                    fits(s[i - 1], p[j - 2]) and table[i - 1][j]
                )
    return table[m][n]


def _digits(num: int) -> str:
    if num < 0:
        raise ValueError("number must not be negative")
    return str(num)


def _pairs_up(first: str, second: str) -> bool:
    return 10 <= int(first + second) <= 25


def translate_count(num: int) -> int:
    """Ways to read num's digits as letters, 0->a ... 25->z.

    Raises ValueError for a negative number.
    """
    s = _digits(num)
    ways = [1, 1]
    for first, second in zip(s, s[1:]):
        ways.append(ways[-1] + (ways[-2] if _pairs_up(first, second) else 0))
    return ways[-1]


def translate_count_compact(num: int) -> int:
    """Translation count keeping only the last two partial counts."""
    s = _digits(num)
    before, last = 1, 1
    for first, second in zip(s, s[1:]):
        before, last = last, last + (before if _pairs_up(first, second) else 0)
    return last


def translate_count_recursive(num: int) -> int:
    """Translation count by recursion over digit positions."""
    s = _digits(num)

    @cache
    def ways(i: int) -> int:
        if i >= len(s) - 1:
            return 1
        total = ways(i + 1)
        if _pairs_up(s[i], s[i + 1]):
            total += ways(i + 2)
        return total

    return ways(0)