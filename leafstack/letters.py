"""Mapping of integers onto the upper-case letters A..Z."""

FIRST_LETTER = 65  # 'A'
LAST_LETTER = 90  # 'Z'
LETTER_COUNT = LAST_LETTER - FIRST_LETTER + 1


def to_ascii(value: int) -> int:
    """Return the character code that ``value`` maps to.

    The remainder keeps the sign of ``value`` (truncating division), so
    non-negative values always land in the range ``[65, 90]``.
    """
    remainder = abs(value) % LETTER_COUNT
    if value < 0:
        remainder = -remainder
    return remainder + FIRST_LETTER