"""Prune the candidate file set down to the requested databases.

Only paths under ``/<tablespace>/`` take part in selective restore.
Anything else in the backup (``global/``, WAL, configuration files,
other tablespaces) is always kept.
"""

import logging
from collections.abc import Iterable, MutableSet

from selective_restore.restore.matcher import is_file_in_patterns
from selective_restore.restore.models import DEFAULT_TABLESPACE

logger = logging.getLogger(__name__)


def tablespace_prefix(tablespace: str = DEFAULT_TABLESPACE) -> str:
    """Return the path prefix of files subject to filtering."""
    return f"/{tablespace}/"


def filter_files_to_unwrap(
    files_to_unwrap: MutableSet[str],
    restore_patterns: Iterable[str],
    tablespace: str = DEFAULT_TABLESPACE,
) -> set[str]:
    """Remove files of unrequested databases from ``files_to_unwrap`` in place.

    The set is traversed through a snapshot, so every original entry is
    visited once even though entries are removed during the pass.  The
    operation is not transactional: if a pattern turns out to be malformed
    the files removed so far stay removed.

    Args:
        files_to_unwrap: Candidate archive paths, mutated in place.
        restore_patterns: Glob patterns of the databases to keep.
        tablespace: Tablespace directory whose children are filtered.

    Returns:
        The paths that were removed.

    Raises:
        MalformedPatternError: If a pattern is not a valid glob.
    """
    patterns = list(restore_patterns)
    prefix = tablespace_prefix(tablespace)
    removed: set[str] = set()

    for file in sorted(files_to_unwrap):
        if not file.startswith(prefix):
            continue
        if not is_file_in_patterns(patterns, file):
            files_to_unwrap.discard(file)
            removed.add(file)

    logger.debug(
        f"Selective restore removed {len(removed)} files, "
        f"{len(files_to_unwrap)} left to unwrap"
    )
    return removed
