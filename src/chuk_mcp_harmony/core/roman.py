"""Roman numeral rendering for scale degrees."""

from __future__ import annotations

_NUMERALS: list[tuple[int, str]] = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def to_roman_num(number: int) -> str:
    """
    Convert a positive integer to an upper-case Roman numeral.

    1 -> 'I', 4 -> 'IV', 7 -> 'VII'. Zero and negatives give ''.
    """
    result = ""
    for value, symbol in _NUMERALS:
        while number >= value:
            result += symbol
            number -= value
    return result
