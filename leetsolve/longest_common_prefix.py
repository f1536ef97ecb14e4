"""Several ways to find the longest common prefix of a list of strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise


def _common_prefix_length(a: str, b: str) -> int:
    length = 0
    for x, y in zip(a, b):
        if x != y:
            break
        length += 1
    return length


def _common_prefix(left: str, right: str) -> str:
    return left[: _common_prefix_length(left, right)]


def longest_common_prefix(strs: list[str]) -> str:
    """Take the shortest common prefix over every adjacent pair of strings."""
    if not strs:
        raise ValueError("strs must not be empty")
    if len(strs) == 1:
        return strs[0]
    shortest = min(_common_prefix_length(a, b) for a, b in pairwise(strs))
    return strs[0][:shortest]


def longest_common_prefix_horizontal(strs: list[str]) -> str:
    """Shrink the candidate prefix while a string still contains it.

    The candidate starts as the first string, which always contains
    itself, so the candidate is shrunk away and the result is ''.
    """
    if not strs:
        return ""
    prefix = strs[0]
    for s in strs:
        while prefix in s:
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def longest_common_prefix_vertical(strs: list[str]) -> str:
    """Compare the strings column by column until one differs or ends."""
    if not strs:
        return ""
    first = strs[0]
    for i in range(len(first) + 1):
        if any(i == len(s) or s[i] != first[i : i + 1] for s in strs):
            return first[:i]
    return first


def _lcp_range(strs: list[str], lo: int, hi: int) -> str:
    if lo == hi:
        return strs[lo]
    mid = (lo + hi) // 2
    return _common_prefix(_lcp_range(strs, lo, mid), _lcp_range(strs, mid + 1, hi))


def longest_common_prefix_divide_and_conquer(strs: list[str]) -> str:
    """Split the list in halves and merge the prefixes of both halves."""
    if not strs:
        return ""
    return _lcp_range(strs, 0, len(strs) - 1)


def longest_common_prefix_binary_search(strs: list[str]) -> str:
    """Binary search on the prefix length of the first string."""
    if not strs:
        return ""
    first = strs[0]

    def is_common_prefix(length: int) -> bool:
        prefix = first[:length]
        return all(s.startswith(prefix) for s in strs)

    low, high = 1, min(len(s) for s in strs)
    while low <= high:
        middle = (low + high) // 2
        if is_common_prefix(middle):
            low = middle + 1
        else:
            high = middle - 1
    return first[: (low + high) // 2]


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the tree."""
        node = self._root
        for c in word:
            child = node.children.get(c)
            if child is None:
                child = node.children[c] = _TrieNode()
            node = child
        node.is_end = True

    def search_longest_prefix(self, word: str) -> str:
        """Follow ``word`` while the path does not branch or end a word."""
        node = self._root
        prefix = []
        for c in word:
            child = node.children.get(c)
            if child is None or len(node.children) != 1 or node.is_end:
                break
            prefix.append(c)
            node = child
        return "".join(prefix)


def longest_common_prefix_trie(q: str, strs: list[str]) -> str:
    """Insert every string into a trie and walk it along ``q``."""
    if not strs:
        return ""
    if len(strs) == 1:
        return strs[0]
    trie = Trie()
    for word in strs:
        trie.insert(word)
    return trie.search_longest_prefix(q)