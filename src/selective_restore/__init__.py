"""selective-restore: restore only the requested databases from a PostgreSQL backup.

Resolves database names to their ``/base/<oid>/`` directories using the
backup's files metadata and prunes the set of archive files to extract.
The system databases (``template0``, ``template1``, ``postgres``) are
always restored.

Usage:
    from selective_restore import DatabaseSpecExtractProvider, select_extract_provider
    from selective_restore import make_restore_patterns, filter_files_to_unwrap
    from selective_restore import load_restore_config, RestoreConfig
"""

__version__ = "0.1.0"

# Config
from selective_restore.config.loader import load_restore_config
from selective_restore.config.models import RestoreConfig

# Restore filtering
from selective_restore.restore.errors import (
    DatabaseNotFoundError,
    MalformedPatternError,
    RestoreFilterError,
)
from selective_restore.restore.filter import filter_files_to_unwrap
from selective_restore.restore.models import DatabaseRecord, FilesMetadata
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
    # Config
    "load_restore_config",
    "RestoreConfig",
    # Errors
    "RestoreFilterError",
    "DatabaseNotFoundError",
    "MalformedPatternError",
    # Models
    "DatabaseRecord",
    "FilesMetadata",
    # Filtering
    "SYSTEM_DATABASES",
    "add_system_databases",
    "make_restore_patterns",
    "filter_files_to_unwrap",
    # Providers
    "Backup",
    "ExtractProvider",
    "DatabaseSpecExtractProvider",
    "select_extract_provider",
]
