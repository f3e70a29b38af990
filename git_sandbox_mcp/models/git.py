"""Commit and repository state models."""

from collections.abc import Mapping
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

DEFAULT_BRANCH = "main"


class FileStatus(StrEnum):
    """Classification of a working tree path relative to the repository."""

    UNTRACKED = "untracked"
    STAGED = "staged"
    TRACKED_CLEAN = "tracked_clean"


class Commit(BaseModel):
    """An immutable commit record."""

    model_config = ConfigDict(frozen=True)

    id: str
    message: str
    parents: tuple[str, ...] = ()
    timestamp: datetime
    snapshot: frozenset[str] = frozenset()


class GitState(BaseModel):
    """
    The simplified object/ref store.

    `branches` maps a branch name to its tip commit id, or to None while the
    branch is unborn (exists but has no commits yet).
    """

    model_config = ConfigDict(frozen=True)

    is_initialized: bool = False
    current_branch: str = ""
    commits: tuple[Commit, ...] = ()
    branches: Mapping[str, str | None] = Field(default_factory=lambda: MappingProxyType({}))
    staged_files: frozenset[str] = frozenset()
    tracked_files: frozenset[str] = frozenset()
    commit_counter: int = 0

    @field_validator("branches")
    @classmethod
    def _freeze_branches(cls, branches: Mapping) -> Mapping:
        return MappingProxyType(dict(branches))

    @field_serializer("branches")
    def _serialize_branches(self, branches: Mapping) -> dict:
        return dict(branches)
