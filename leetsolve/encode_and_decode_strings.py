"""Length-prefixed encoding of a list of strings into one string."""


def encode(strs: list[str]) -> str:
    """Encode each string as ``<length>#<string>`` and concatenate."""
    return "".join(f"{len(s)}#{s}" for s in strs)


def decode(s: str) -> list[str]:
    """Split a string produced by :func:`encode` back into its parts."""
    result = []
    index = 0
    while index < len(s):
        separator = s.index("#", index)
        length = int(s[index:separator])
        start = separator + 1
        end = start + length
        if length < 0 or end > len(s):
            raise ValueError(f"truncated entry at position {index}")
        result.append(s[start:end])
        index = end
    return result