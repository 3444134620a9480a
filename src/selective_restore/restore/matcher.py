"""Shell-style glob matching for restore patterns.

Matching uses ``fnmatch.fnmatchcase``: it is case-sensitive and ``*``
matches any run of characters, path separators included, so
``/base/16384/*`` covers the whole database directory.

``fnmatch`` silently treats a broken character class or a dangling
backslash as literal text.  Restore patterns are built from metadata, so
either means the metadata is wrong; ``validate_pattern`` rejects them.
Validation results are cached, so each distinct pattern is checked once
per process however many paths it is matched against.
"""

import fnmatch
from collections.abc import Iterable
from functools import lru_cache

from selective_restore.restore.errors import MalformedPatternError


@lru_cache(maxsize=1024)
def validate_pattern(pattern: str) -> None:
    """Check that ``pattern`` is a well-formed glob.

    Raises:
        MalformedPatternError: On an unterminated ``[...]`` character class
            or a trailing ``\\``.
    """
    if pattern.endswith("\\"):
        raise MalformedPatternError(pattern, "trailing backslash")
    i = 0
    n = len(pattern)
    while i < n:
        if pattern[i] == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A leading ']' is a literal member of the class
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise MalformedPatternError(pattern, "unterminated character class")
            i = j + 1
            continue
        i += 1


def match_pattern(pattern: str, path: str) -> bool:
    """Return whether ``path`` matches the glob ``pattern``."""
    validate_pattern(pattern)
    return fnmatch.fnmatchcase(path, pattern)


def is_file_in_patterns(patterns: Iterable[str], path: str) -> bool:
    """Return whether ``path`` matches any pattern, stopping at the first hit."""
    for pattern in patterns:
        if match_pattern(pattern, path):
            return True
    return False
