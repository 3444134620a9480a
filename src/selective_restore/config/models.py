"""Pydantic models for selective restore configuration."""

from pydantic import BaseModel, Field, field_validator

from selective_restore.restore.models import DEFAULT_TABLESPACE, check_tablespace
from selective_restore.restore.patterns import SYSTEM_DATABASES


class RestoreConfig(BaseModel):
    """Selective restore settings from the ``[restore]`` table of a TOML file."""

    only_databases: list[str] = Field(default_factory=list)
    tablespace: str = DEFAULT_TABLESPACE
    system_databases: list[str] = Field(default_factory=lambda: list(SYSTEM_DATABASES))

    @field_validator("tablespace")
    @classmethod
    def _check_tablespace(cls, value: str) -> str:
        return check_tablespace(value)
