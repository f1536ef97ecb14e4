"""Conversion of integers to Roman numerals."""

_NUMERALS = tuple(
    zip(
        (1000, 900, 500, 400, 100, 90, 50, 40, 10, 9, 5, 4, 1),
        "M CM D CD C XC L XL X IX V IV I".split(),
    )
)


def int_to_roman(num: int) -> str:
    """Return the Roman numeral for ``num``; non-positive numbers give ''."""
    result = ""
    number = num
    for value, symbol in _NUMERALS:
        if number <= 0:
            break
        count, number = divmod(number, value)
        result += symbol * count
    return result


def int_to_roman_not_fast(num: int) -> str:
    """Same conversion, collecting symbols in a list before joining."""
    parts: list[str] = []
    number = num
    for value, symbol in _NUMERALS:
        if number <= 0:
            break
        count, number = divmod(number, value)
        parts.extend([symbol] * count)
    return "".join(parts)