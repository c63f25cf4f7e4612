"""Node kind models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeCategory(str, Enum):
    """Category of a component kind."""

    PARAGRAPH = "paragraph"
    MODIFIER = "modifier"


class NodeKind(BaseModel):
    """A component kind and the selector template addressing it on a page.

    Attributes:
        name: Upper snake case identifier used in documents (e.g. ``IMAGE``).
        category: Whether the kind is a paragraph or a modifier.
        template: Selector template. ``{index}`` is replaced by the occurrence
            of the node under its parent; templates without it ignore the index.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[A-Z_]+$")
    category: NodeCategory = NodeCategory.PARAGRAPH
    template: str

    @field_validator("template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        try:
            value.format(index=1)
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(
                f"Selector template may only use the {{index}} placeholder: {value!r}"
            ) from exc
        return value

    @property
    def is_modifier(self) -> bool:
        return self.category is NodeCategory.MODIFIER

    def selector(self, occurrence: int) -> str:
        """Apply the template to a 1-based occurrence index."""
        return self.template.format(index=occurrence)
