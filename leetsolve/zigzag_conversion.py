"""Zigzag row reading of a string."""


def convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read row by row."""
    if num_rows == 1:
        return s
    if num_rows < 1:
        raise ValueError("num_rows must be positive")
    rows = [""] * num_rows
    row = 0
    upward = False
    for c in s:
        rows[row] += c
        row += -1 if upward else 1
        if row in (0, num_rows - 1):
            upward = not upward
    return "".join(rows)


def convert_pretty_but_inefficient(s: str, num_rows: int) -> str:
    """Same zigzag, laid out on a '#'-filled grid that is then stripped.

    Any '#' in the input is dropped along with the padding.
    """
    if num_rows == 1:
        return s
    if num_rows < 1:
        raise ValueError("num_rows must be positive")
    grid = [["#"] * len(s) for _ in range(num_rows)]
    row = column = 0
    upward = False
    for c in s:
        grid[row][column] = c
        if upward:
            row -= 1
            column += 1
        else:
            row += 1
        if row in (0, num_rows - 1):
            upward = not upward
    return "".join("".join(line).replace("#", "") for line in grid)