"""Translate database names into restore glob patterns.

Each database lives in ``/<tablespace>/<oid>/`` inside the backup, so a
name resolves to the pattern ``/<tablespace>/<oid>/*``.  The system
databases are always added to the requested names so that a restore of
any subset still produces a usable cluster.

Usage:
    from selective_restore.restore.patterns import (
        add_system_databases,
        make_restore_patterns,
    )

    names = add_system_databases(["app"])
    patterns = make_restore_patterns(names, meta.databases_by_names)
"""

import logging
from collections.abc import Iterable

from selective_restore.restore.errors import DatabaseNotFoundError
from selective_restore.restore.models import DEFAULT_TABLESPACE, DatabasesByNames

logger = logging.getLogger(__name__)

SYSTEM_DATABASES = ("template0", "template1", "postgres")


def add_system_databases(
    databases: Iterable[str],
    system_databases: Iterable[str] = SYSTEM_DATABASES,
) -> list[str]:
    """Return a new list with the system database names appended.

    The caller's sequence is never modified.
    """
    return [*databases, *system_databases]


def make_restore_pattern(
    databases_by_names: DatabasesByNames,
    name: str,
    tablespace: str = DEFAULT_TABLESPACE,
) -> str:
    """Build the glob pattern for one database.

    Raises:
        DatabaseNotFoundError: If ``name`` is not in the backup metadata.
    """
    record = databases_by_names.get(name)
    if record is None:
        raise DatabaseNotFoundError(name)
    return f"/{tablespace}/{record.oid}/*"


def make_restore_patterns(
    databases: Iterable[str],
    databases_by_names: DatabasesByNames,
    tablespace: str = DEFAULT_TABLESPACE,
) -> list[str]:
    """Resolve database names into restore patterns, preserving order.

    Resolution is all-or-nothing: the first unknown name aborts and no
    patterns are returned.

    Args:
        databases: Database names to restore (system names included).
        databases_by_names: Name to record mapping from the backup metadata.
        tablespace: Tablespace directory holding the database folders.

    Returns:
        One pattern per name, in input order.

    Raises:
        DatabaseNotFoundError: If any name is missing from the metadata.
    """
    patterns = [
        make_restore_pattern(databases_by_names, name, tablespace)
        for name in databases
    ]
    logger.debug(f"Resolved restore patterns: {patterns}")
    return patterns
