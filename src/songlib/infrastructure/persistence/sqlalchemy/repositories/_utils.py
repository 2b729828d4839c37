"""Shared utilities for SQLAlchemy repositories."""

LIKE_ESCAPE_CHAR = "\\"


def contains_pattern(value: str) -> str:
    """
    Build a LIKE pattern matching ``value`` anywhere in a column.

    Wildcards in the value itself are escaped, so ``"100%"`` matches the
    literal text and not every string starting with ``"100"``.
    """
    escaped = (
        value.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", f"{LIKE_ESCAPE_CHAR}%")
        .replace("_", f"{LIKE_ESCAPE_CHAR}_")
    )
    return f"%{escaped}%"
