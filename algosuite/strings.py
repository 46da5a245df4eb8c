"""String puzzles: anagrams, rotations, encodings and constructions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from string import ascii_lowercase, ascii_uppercase

_KEYBOARD_WIDTH = 6


def is_anagram(s: str, t: str) -> bool:
    """True if t uses exactly the same characters as s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_rotation(s: str, goal: str) -> bool:
    """True if some rotation of a non-empty s equals goal."""
    return bool(s) and len(s) == len(goal) and goal in s + s


def min_alternating_changes(s: str) -> int:
    """Fewest flips that make a binary string alternate."""
    zero_first = sum(ch != "01"[i % 2] for i, ch in enumerate(s))
    return min(zero_first, len(s) - zero_first)


def decode_ciphertext(encoded_text: str, rows: int) -> str:
    """Read a slanted-transposition ciphertext back into plain text."""
    if rows < 1:
        raise ValueError("rows must be positive")
    if rows == 1:
        return encoded_text
    cols = len(encoded_text) // rows
    chars = (
        encoded_text[r * cols + c + r]
        for c in range(cols)
        for r in range(min(rows, cols - c))
    )
    return "".join(chars).rstrip(" ")


def _within_two_edits(a: str, b: str) -> bool:
    return sum(x != y for x, y in zip(a, b)) <= 2


def two_edit_words(queries: Sequence[str], dictionary: Sequence[str]) -> list[str]:
    """Queries that differ from some dictionary word in at most two places."""
    return [q for q in queries if any(_within_two_edits(q, w) for w in dictionary)]


def can_be_equal(s1: str, s2: str) -> bool:
    """True if swapping characters two apart can turn s1 into s2 (length 4)."""
    if len(s1) != 4 or len(s2) != 4:
        raise ValueError("both strings must have length 4")

    def pair_matches(i: int, j: int) -> bool:
        return (s1[i], s1[j]) in ((s2[i], s2[j]), (s2[j], s2[i]))

    return pair_matches(0, 2) and pair_matches(1, 3)


def check_strings(s1: str, s2: str) -> bool:
    """True if s1 becomes s2 by swapping characters an even distance apart."""
    return Counter(s1[0::2]) == Counter(s2[0::2]) and Counter(s1[1::2]) == Counter(
        s2[1::2]
    )


def count_special_chars(word: str) -> int:
    """Letters that appear both in lower and upper case."""
    present = set(word)
    return sum(
        lower in present and upper in present
        for lower, upper in zip(ascii_lowercase, ascii_uppercase)
    )


def count_strictly_special_chars(word: str) -> int:
    """Letters whose every lower-case use precedes the first upper-case use."""
    last_lower: dict[str, int] = {}
    first_upper: dict[str, int] = {}
    for i, ch in enumerate(word):
        if ch.islower():
            last_lower[ch] = i
        else:
            first_upper.setdefault(ch.lower(), i)
    return sum(
        1
        for letter in ascii_lowercase
        if letter in last_lower
        and letter in first_upper
        and last_lower[letter] < first_upper[letter]
    )


def find_string_from_lcp(lcp: Sequence[Sequence[int]]) -> str:
    """Smallest string whose longest-common-prefix matrix is lcp, or ""."""
    n = len(lcp)
    word = [""] * n
    letters = iter(ascii_lowercase)
    for i in range(n):
        if word[i]:
            continue
        letter = next(letters, None)
        if letter is None:
            return ""
        word[i] = letter
        for j in range(i + 1, n):
            if lcp[i][j] > 0:
                word[j] = letter

    for i in reversed(range(n)):
        for j in reversed(range(n)):
            if word[i] != word[j]:
                if lcp[i][j]:
                    return ""
            elif i == n - 1 or j == n - 1:
                if lcp[i][j] != 1:
                    return ""
            elif lcp[i][j] != lcp[i + 1][j + 1] + 1:
                return ""
    return "".join(word)


def generate_string(str1: str, str2: str) -> str:
    """Smallest string whose windows match str2 exactly where str1 has 'T'."""
    n, m = len(str1), len(str2)
    result = ["a"] * (n + m - 1)
    fixed = [False] * (n + m - 1)

    for i, flag in enumerate(str1):
        if flag != "T":
            continue
        for j, ch in enumerate(str2):
            pos = i + j
            if fixed[pos] and result[pos] != ch:
                return ""
            result[pos] = ch
            fixed[pos] = True

    for i, flag in enumerate(str1):
        if flag != "F":
            continue
        window = range(i, i + m)
        if any(result[p] != str2[p - i] for p in window):
            continue
        free = [p for p in window if not fixed[p]]
        if not free:
            return ""
        result[free[-1]] = "b"
    return "".join(result)


def furthest_distance_from_origin(moves: str) -> int:
    """Furthest reachable distance when each '_' may go either way."""
    lefts = moves.count("L")
    rights = moves.count("R")
    return abs(lefts - rights) + len(moves) - lefts - rights


def _key_distance(p: int, q: int) -> int:
    row1, col1 = divmod(p, _KEYBOARD_WIDTH)
    row2, col2 = divmod(q, _KEYBOARD_WIDTH)
    return abs(row1 - row2) + abs(col1 - col2)


def minimum_typing_distance(word: str) -> int:
    """Least total finger travel to type an upper-case word with two fingers."""
    if not word:
        raise ValueError("word must not be empty")
    codes = [ord(ch) - ord("A") for ch in word]
    if any(not 0 <= code < 26 for code in codes):
        raise ValueError("word must consist of letters A-Z")

    # costs[k]: least travel so far with the idle finger resting on key k.
    costs = [0] * 26
    for prev, cur in zip(codes, codes[1:]):
        step = _key_distance(prev, cur)
        following = [cost + step for cost in costs]
        following[prev] = min(
            following[prev],
            min(cost + _key_distance(k, cur) for k, cost in enumerate(costs)),
        )
        costs = following
    return min(costs)