"""Backup metadata models consumed by the restore filter.

Only the part of the files metadata that selective restore needs is
modelled here: the mapping from database name to its directory oid.

Usage:
    from selective_restore.restore.models import DatabaseRecord, FilesMetadata

    meta = FilesMetadata(databases_by_names={
        "postgres": DatabaseRecord(name="postgres", oid=5),
        "app": DatabaseRecord(name="app", oid=16384),
    })
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TABLESPACE = "base"


def check_tablespace(tablespace: str) -> str:
    """Return ``tablespace`` if it is usable as a directory name in patterns.

    Raises:
        ValueError: If the name is empty or holds a path separator or glob
            metacharacter.
    """
    if not tablespace or any(c in tablespace for c in "/*?[]\\"):
        raise ValueError(f"Invalid tablespace directory name: '{tablespace}'")
    return tablespace


class DatabaseRecord(BaseModel):
    """One database known to the backup."""

    model_config = ConfigDict(frozen=True)

    name: str
    oid: int = Field(ge=0)      # directory name under the tablespace root


DatabasesByNames = dict[str, DatabaseRecord]


class FilesMetadata(BaseModel):
    """Files metadata stored alongside a backup."""

    model_config = ConfigDict(populate_by_name=True)

    databases_by_names: DatabasesByNames = Field(
        default_factory=dict,
        alias="DatabasesByNames",
    )

    @classmethod
    def from_oids(cls, oids: dict[str, int]) -> "FilesMetadata":
        """Build metadata from a plain ``{name: oid}`` mapping."""
        return cls(
            databases_by_names={
                name: DatabaseRecord(name=name, oid=oid)
                for name, oid in oids.items()
            }
        )
