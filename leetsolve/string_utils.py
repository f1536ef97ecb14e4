"""Small string helpers."""


def remove_non_alphanumeric(s: str) -> str:
    """Return ``s`` with every character that is not alphanumeric dropped."""
    return "".join(c for c in s if c.isalnum())