"""Pydantic v2 models for design-tool exports and derived template data.

Defines the flat element records (``metadata.json``), the hierarchical tree
(``tree.json``) with its tagged ``properties`` payload, and the per-container
configuration handed to the code templates.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ElementType(str, Enum):
    """Known element kinds. Other values are accepted and passed through."""
    CONTAINER = "Container"
    LIST = "List"
    CELL = "Cell"
    VIEW = "View"
    TEXT = "Text"
    IMAGE = "Image"
    BUTTON = "Button"


# ---------------------------------------------------------------------------
# Element records
# ---------------------------------------------------------------------------

class Rect(BaseModel):
    """Element geometry. Position keys are optional and kept when present."""
    model_config = ConfigDict(extra="allow")

    width: float = Field(default=0)
    height: float = Field(default=0)


class Element(BaseModel):
    """A flat design-entity record from ``metadata.json``.

    Unknown keys are kept so the raw record can be handed to templates.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(default="", description="Unique within a generation run")
    name: str = Field(default="", description="Designer-facing element name")
    type: str = Field(default="", description="ElementType value or any other kind")
    rect: Optional[Rect] = Field(default=None, description="Element geometry")

    @property
    def is_container(self) -> bool:
        return bool(self.id) and self.type == ElementType.CONTAINER

    def to_context(self) -> dict[str, Any]:
        """Return the record as it appeared in the export."""
        return self.model_dump(mode="json", exclude_unset=True)


# ---------------------------------------------------------------------------
# Tree node properties (tagged union on ``type``)
# ---------------------------------------------------------------------------

class _Properties(BaseModel):
    model_config = ConfigDict(extra="allow")


class ContainerProperties(_Properties):
    type: Literal["container"]
    background_color: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("backgroundColor", "background_color")
    )


class ListProperties(_Properties):
    type: Literal["list"]
    scroll_direction: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("scrollDirection", "scroll_direction")
    )


class CellProperties(_Properties):
    type: Literal["cell"]
    reuse_identifier: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("reuseIdentifier", "reuse_identifier")
    )


class ViewProperties(_Properties):
    type: Literal["view"]
    background_color: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("backgroundColor", "background_color")
    )


class TextProperties(_Properties):
    type: Literal["text"]
    text: str = Field(default="")
    font_size: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("fontSize", "font_size")
    )
    text_color: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("textColor", "text_color")
    )


class ImageProperties(_Properties):
    type: Literal["image"]
    image_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("imageName", "image_name")
    )


class ButtonProperties(_Properties):
    type: Literal["button"]
    title: str = Field(default="")


NodeProperties = Annotated[
    Union[
        ContainerProperties,
        ListProperties,
        CellProperties,
        ViewProperties,
        TextProperties,
        ImageProperties,
        ButtonProperties,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------

class TreeNode(BaseModel):
    """A node of ``tree.json``; ``uid`` links it to an :class:`Element`."""

    uid: str = Field(default="")
    name: Optional[str] = Field(default=None)
    elements: list["TreeNode"] = Field(default_factory=list)
    properties: Optional[NodeProperties] = Field(default=None)
    exclude_on_adopt: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "excludeOnAdopt", "shouldExcludeOnAdopt", "shuoldExcludeOnAdopt", "exclude_on_adopt"
        ),
    )

    def iter_uids(self):
        """Yield this node's uid then every descendant uid, pre-order."""
        yield self.uid
        for child in self.elements:
            yield from child.iter_uids()


TreeNode.model_rebuild()


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Derived per-container configuration
# ---------------------------------------------------------------------------

class Size(_CamelModel):
    width: float = 0
    height: float = 0


class Insets(_CamelModel):
    top: float = 0
    left: float = 0
    bottom: float = 0
    right: float = 0


class DataVariable(_CamelModel):
    """A collection variable backing one list section."""
    name: str
    type: str


class ListSection(_CamelModel):
    """One section of a container's list, derived from a unique cell."""
    class_prefix: str
    section_name: str
    variable_name: str
    size: Size = Field(default_factory=Size)
    insets: Insets = Field(default_factory=Insets)


class ContainerConfig(_CamelModel):
    """Template-binding data for one container. Created per run, then discarded."""
    container: Element
    list_name: Optional[str] = None
    dynamic_classes: list[str] = Field(default_factory=list)
    data_variables: list[DataVariable] = Field(default_factory=list)
    list_sections: list[ListSection] = Field(default_factory=list)

    def to_context(self) -> dict[str, Any]:
        """camelCase template context; ``listName`` is absent when unset."""
        context = self.model_dump(
            mode="json", by_alias=True, exclude={"container"}, exclude_none=True
        )
        context["container"] = self.container.to_context()
        return context


class GeneratedOutput(BaseModel):
    """A rendered artifact waiting for the batch commit."""
    file_path: Path
    content: str
