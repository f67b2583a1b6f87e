import re

from .errors import PatternError
from .listens import Listen


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a case-insensitive search pattern."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise PatternError(f"invalid search pattern {pattern!r}: {e}") from e


def matches(regex: re.Pattern[str], listen: Listen) -> bool:
    """Return True if the pattern occurs anywhere in the rendered listen."""
    return regex.search(str(listen)) is not None
