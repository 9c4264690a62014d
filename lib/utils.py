# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re
from typing import Any

_ID_PATTERN = re.compile(r"-?[0-9]{1,10}")

# Range of a PostgreSQL INTEGER / SERIAL column
MIN_ID = -2_147_483_648
MAX_ID = 2_147_483_647


# =============================================================================
# Identifier Utilities
# =============================================================================

def parse_id(value: Any) -> int | None:
    """
    Parse a path identifier into an integer.

    Accepts ints and decimal integer strings (optionally negative) that
    fit an INTEGER column. Numbers that match no row are still valid ids;
    the caller's existence check turns them into a 404. Booleans, floats,
    whitespace, trailing newlines and out-of-range values are rejected.

    Args:
        value: Raw identifier from a path segment or caller

    Returns:
        The identifier as int, or None if it does not have a valid shape

    Example:
        parse_id("3")       # 3
        parse_id(7)         # 7
        parse_id("-1")      # -1
        parse_id("banana")  # None
        parse_id("3\\n")     # None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _ID_PATTERN.fullmatch(value):
        number = int(value)
    else:
        return None

    if number < MIN_ID or number > MAX_ID:
        return None
    return number
