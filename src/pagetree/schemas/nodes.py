"""Component and configuration node models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pagetree.exceptions import InvalidNodeLevel, InvalidOccurrence
from pagetree.schemas.kinds import NodeKind


class ConfigurationNode(BaseModel):
    """An immutable, order-preserving set of configuration key/value pairs."""

    model_config = ConfigDict(frozen=True)

    EMPTY: ClassVar[ConfigurationNode]

    entries: dict[str, str] = Field(default_factory=dict)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.entries.get(key, default)

    def has_property(self, key: str) -> bool:
        return key in self.entries

    def keys(self) -> list[str]:
        return list(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


ConfigurationNode.EMPTY = ConfigurationNode()


class ComponentNode(BaseModel):
    """A paragraph or modifier placed at a given depth of the component tree.

    Nodes compare by identity: two ``IMAGE`` nodes at the same level are
    different entries of the tree.

    Attributes:
        level: 1-based nesting depth.
        kind: The component kind, used to build the node's selector.
        is_modifier: True for modifier nodes, False for paragraphs.
        occurrence_under_parent: 1-based rank among same-kind siblings under
            the same parent, or among same-kind root nodes.
        inline_config: Configuration given on the component's own line.
    """

    model_config = ConfigDict(validate_assignment=True)

    level: int
    kind: NodeKind
    is_modifier: bool = False
    occurrence_under_parent: int = 1
    inline_config: ConfigurationNode | None = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: int) -> int:
        if value < 1:
            raise InvalidNodeLevel(f"Node level should be at least one. It was: [{value}]")
        return value

    @field_validator("occurrence_under_parent")
    @classmethod
    def _check_occurrence(cls, value: int) -> int:
        if value < 1:
            raise InvalidOccurrence(
                f"Occurrence count under parent should be greater than 0. It was: [{value}]."
            )
        return value

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        marker = "@" if self.is_modifier else ""
        return (
            f"{'-' * self.level}{marker} {self.kind.name}"
            f" (occurrence {self.occurrence_under_parent})"
        )

    def is_one_level_deeper_than(self, node: ComponentNode) -> bool:
        return self.level - node.level == 1

    def is_deeper_than(self, node: ComponentNode) -> bool:
        """Deeper means a greater level number, i.e. the child direction."""
        return self.level > node.level

    def is_higher_than(self, node: ComponentNode) -> bool:
        """Higher means a lesser level number, i.e. the ancestor direction."""
        return self.level < node.level

    def is_at_same_level_as(self, node: ComponentNode) -> bool:
        return self.level == node.level

    def is_at_root_level(self) -> bool:
        return self.level == 1

    def has_same_kind_as(self, node: ComponentNode) -> bool:
        return self.kind == node.kind
