"""File system node and state models for the simulated working tree."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

ROOT_PATH = "/root"
PATH_SEPARATOR = "/"


class FileNode(BaseModel):
    """A file in the virtual tree. Files carry no content, only existence."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"


class DirectoryNode(BaseModel):
    """
    A directory mapping child names to nodes.

    `children` is a read-only view over a private dict, so a subtree shared
    between two states cannot be changed through either of them.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["directory"] = "directory"
    children: Mapping[str, "FSNode"] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("children")
    @classmethod
    def _validate_child_names(cls, children: Mapping) -> Mapping:
        for name in children:
            if not name or PATH_SEPARATOR in name:
                raise ValueError(f"Invalid node name: {name!r}")
        return MappingProxyType(dict(children))

    @field_serializer("children")
    def _serialize_children(self, children: Mapping) -> dict:
        return dict(children)


FSNode = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="type")]

DirectoryNode.model_rebuild()


class FileSystemState(BaseModel):
    """Stores the virtual file tree and the current working directory."""

    model_config = ConfigDict(frozen=True)

    root: DirectoryNode = Field(default_factory=DirectoryNode)
    cwd: str = ROOT_PATH
