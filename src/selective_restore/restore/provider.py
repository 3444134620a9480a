"""Extract provider protocols and the database-selective decorator.

An extract provider turns a backup and a set of archive paths into the
objects that perform the actual unpacking.  ``DatabaseSpecExtractProvider``
wraps any provider and prunes the file set to the requested databases
before delegating, so pre-processing steps stack without either layer
knowing about the other.

Usage:
    from selective_restore.restore.provider import DatabaseSpecExtractProvider

    provider = DatabaseSpecExtractProvider(inner_provider, ["app"])
    interpreter, readers, data_dir = provider.get(
        backup,
        files_to_unwrap,
        skip_redundant_tars=False,
        db_data_dir="/var/lib/postgresql/data",
        create_new_incremental_files=False,
    )
"""

import logging
from collections.abc import Iterable, MutableSet, Sequence
from typing import Any, Protocol

from selective_restore.restore.filter import filter_files_to_unwrap
from selective_restore.restore.models import (
    DEFAULT_TABLESPACE,
    FilesMetadata,
    check_tablespace,
)
from selective_restore.restore.patterns import (
    SYSTEM_DATABASES,
    add_system_databases,
    make_restore_patterns,
)

logger = logging.getLogger(__name__)

# (tar interpreter, reader makers, data directory)
ExtractResult = tuple[Any, list[Any], str]


class Backup(Protocol):
    """Backup handle as seen by extract providers."""

    def get_sentinel_and_files_metadata(self) -> tuple[Any, FilesMetadata]:
        """Return the backup sentinel and its files metadata.

        Raises:
            Exception: If the metadata cannot be fetched.
        """
        ...


class ExtractProvider(Protocol):
    """Interface of every extract provider."""

    def get(
        self,
        backup: Backup,
        files_to_unwrap: MutableSet[str],
        skip_redundant_tars: bool,
        db_data_dir: str,
        create_new_incremental_files: bool,
    ) -> ExtractResult:
        """Prepare extraction of ``files_to_unwrap`` from ``backup``.

        Args:
            backup: Backup being restored.
            files_to_unwrap: Archive paths to extract.  Providers may mutate it.
            skip_redundant_tars: Skip tars holding none of the wanted files.
            db_data_dir: Target data directory.
            create_new_incremental_files: Create files that appear only in
                incremental parts.

        Returns:
            Tuple of (tar interpreter, reader makers, data directory).
        """
        ...


class DatabaseSpecExtractProvider:
    """Extract provider restoring only the requested databases.

    The system databases are always restored in addition to the requested
    ones.  Only the default tablespace is pruned; files in other locations
    pass through untouched.

    Raises:
        ValueError: If ``tablespace`` is not a plain directory name.
    """

    def __init__(
        self,
        inner: ExtractProvider,
        only_databases: Iterable[str],
        tablespace: str = DEFAULT_TABLESPACE,
        system_databases: Sequence[str] = SYSTEM_DATABASES,
    ):
        self.inner = inner
        self.only_databases = list(only_databases)
        self.tablespace = check_tablespace(tablespace)
        self.system_databases = tuple(system_databases)

    def get(
        self,
        backup: Backup,
        files_to_unwrap: MutableSet[str],
        skip_redundant_tars: bool,
        db_data_dir: str,
        create_new_incremental_files: bool,
    ) -> ExtractResult:
        """Prune ``files_to_unwrap`` and delegate to the wrapped provider.

        Raises:
            DatabaseNotFoundError: If a requested or system database is not
                in the backup.  ``files_to_unwrap`` is left unchanged.
            MalformedPatternError: If a generated pattern is invalid.
        """
        _, files_meta = backup.get_sentinel_and_files_metadata()

        databases = add_system_databases(self.only_databases, self.system_databases)
        patterns = make_restore_patterns(
            databases, files_meta.databases_by_names, self.tablespace
        )
        removed = filter_files_to_unwrap(files_to_unwrap, patterns, self.tablespace)
        logger.info(
            f"Restoring databases {', '.join(self.only_databases) or '(system only)'}: "
            f"skipped {len(removed)} files"
        )

        return self.inner.get(
            backup,
            files_to_unwrap,
            skip_redundant_tars,
            db_data_dir,
            create_new_incremental_files,
        )


def select_extract_provider(
    inner: ExtractProvider,
    only_databases: Iterable[str] | None = None,
    tablespace: str = DEFAULT_TABLESPACE,
) -> ExtractProvider:
    """Wrap ``inner`` for selective restore when databases are requested.

    An empty or missing database list means a full restore, so ``inner``
    is returned as is.
    """
    databases = list(only_databases or [])
    if not databases:
        return inner
    return DatabaseSpecExtractProvider(inner, databases, tablespace=tablespace)
