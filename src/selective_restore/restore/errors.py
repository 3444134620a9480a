"""Exceptions raised by the selective restore filter.

Both errors are deterministic for a given backup and database list, so
callers should surface them rather than retry.
"""


class RestoreFilterError(Exception):
    """Base class for selective restore errors."""

    pass


class DatabaseNotFoundError(RestoreFilterError):
    """Raised when a requested database is missing from the backup metadata."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Can't make directory by oid or find database in meta with name: '{name}'"
        )


class MalformedPatternError(RestoreFilterError):
    """Raised when a generated restore pattern is not a valid glob."""

    def __init__(self, pattern: str, cause: str):
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"Malformed restore pattern '{pattern}': {cause}")
