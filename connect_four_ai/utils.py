from typing import Optional


def one_index(index: int) -> int:
    """Convert a zero-based index (used internally) into the one-based number shown to players."""
    return index + 1


def zero_index(number: int) -> int:
    """Convert a one-based number typed by a player into a zero-based index."""
    return number - 1


def parse_int(text: str) -> Optional[int]:
    """Return the integer written in the text, or None if it isn't one."""
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        return None
