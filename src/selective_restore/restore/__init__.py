"""Selective restore: extract only the files of requested databases.

Usage:
    from selective_restore.restore import DatabaseSpecExtractProvider
    from selective_restore.restore import make_restore_patterns, filter_files_to_unwrap
"""

from selective_restore.restore.errors import (
    DatabaseNotFoundError,
    MalformedPatternError,
    RestoreFilterError,
)
from selective_restore.restore.filter import filter_files_to_unwrap
from selective_restore.restore.matcher import (
    is_file_in_patterns,
    match_pattern,
    validate_pattern,
)
from selective_restore.restore.models import (
    DEFAULT_TABLESPACE,
    DatabaseRecord,
    FilesMetadata,
    check_tablespace,
)
from selective_restore.restore.patterns import (
    SYSTEM_DATABASES,
    add_system_databases,
    make_restore_patterns,
)
from selective_restore.restore.provider import (
    Backup,
    DatabaseSpecExtractProvider,
    ExtractProvider,
    select_extract_provider,
)

__all__ = [
    "DEFAULT_TABLESPACE",
    "SYSTEM_DATABASES",
    "DatabaseRecord",
    "FilesMetadata",
    "check_tablespace",
    "RestoreFilterError",
    "DatabaseNotFoundError",
    "MalformedPatternError",
    "add_system_databases",
    "make_restore_patterns",
    "match_pattern",
    "validate_pattern",
    "is_file_in_patterns",
    "filter_files_to_unwrap",
    "Backup",
    "ExtractProvider",
    "DatabaseSpecExtractProvider",
    "select_extract_provider",
]
