"""Table row model for the tabular document syntax."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

ROOT_LEVEL_CONFIG_IDENTIFIER = "<"


class TableRow(BaseModel):
    """One ``| component | configuration |`` entry of a table document."""

    model_config = ConfigDict(frozen=True)

    component: str = ""
    configuration: str = ""

    def has_root_level_configuration(self) -> bool:
        """True when the component cell is ``<``, marking a document-level configuration."""
        return self.component == ROOT_LEVEL_CONFIG_IDENTIFIER

    def has_component_definition(self) -> bool:
        return bool(self.component.strip())

    def has_configuration(self) -> bool:
        return bool(self.configuration.strip())
