"""Shared fixtures for selective restore tests."""

import pytest

from selective_restore.restore.models import FilesMetadata


@pytest.fixture
def files_meta() -> FilesMetadata:
    """Backup metadata with the three system databases and one user database."""
    return FilesMetadata.from_oids(
        {"postgres": 1, "template0": 2, "template1": 3, "app": 5}
    )
