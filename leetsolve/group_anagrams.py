"""Group lower-case words that are anagrams of each other."""


def _letter_counts(word: str) -> tuple[int, ...]:
    counts = [0] * 26
    for c in word:
        offset = ord(c) - ord("a")
        if not 0 <= offset < 26:
            raise ValueError(f"unsupported character {c!r} in {word!r}")
        counts[offset] += 1
    return tuple(counts)


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Return groups of words having the same letter counts."""
    groups: dict[tuple[int, ...], list[str]] = {}
    for word in strs:
        groups.setdefault(_letter_counts(word), []).append(word)
    return list(groups.values())