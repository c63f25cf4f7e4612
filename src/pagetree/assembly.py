"""Drive the assembly of a page from a tree-view or table document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from pagetree.catalog import DEFAULT_CATALOG, NodeCatalog
from pagetree.exceptions import EmptyDocument, EmptyRootConfiguration, MisplacedRootConfiguration
from pagetree.grammar import Node, classify_component_cell, classify_configuration_cell, classify_line
from pagetree.schemas import ComponentNode, ConfigurationNode, NodeKind, TableRow
from pagetree.selectors import context_selector_for
from pagetree.tree import ComponentTree
from pagetree.validator import validate_nodes, validate_table_rows

logger = logging.getLogger(__name__)


class ComponentAdder(Protocol):
    """Adds a component to the page under construction."""

    def add_component(self, parent: ComponentNode | None, node: ComponentNode) -> None: ...


class ComponentConfigurer(Protocol):
    """Configures a component, or the page itself when ``kind`` is None."""

    def configure(self, kind: NodeKind | None, configuration: ConfigurationNode) -> None: ...


class ContextSetter(Protocol):
    """Makes ``selector`` the context of the following page actions.

    ``entering`` is True when a freshly added component becomes current and
    False when the context is refreshed before configuring it.
    """

    def set_context(
        self, tree: ComponentTree, node: ComponentNode, selector: str, entering: bool
    ) -> None: ...


@dataclass
class SelectorRecorder:
    """Collaborator recording every add, configure and context call."""

    added: list[tuple[ComponentNode | None, ComponentNode]] = field(default_factory=list)
    configured: list[tuple[NodeKind | None, ConfigurationNode]] = field(default_factory=list)
    contexts: list[tuple[str, bool]] = field(default_factory=list)
    selectors: dict[int, str] = field(default_factory=dict)

    def add_component(self, parent: ComponentNode | None, node: ComponentNode) -> None:
        self.added.append((parent, node))

    def configure(self, kind: NodeKind | None, configuration: ConfigurationNode) -> None:
        self.configured.append((kind, configuration))

    def set_context(
        self, tree: ComponentTree, node: ComponentNode, selector: str, entering: bool
    ) -> None:
        self.contexts.append((selector, entering))
        self.selectors[id(node)] = selector

    @property
    def current_selector(self) -> str | None:
        return self.contexts[-1][0] if self.contexts else None

    def selector_of(self, node: ComponentNode) -> str | None:
        return self.selectors.get(id(node))


class _Assembler:
    def __init__(
        self,
        adder: ComponentAdder,
        configurer: ComponentConfigurer,
        context_setter: ContextSetter,
        *,
        catalog: NodeCatalog = DEFAULT_CATALOG,
    ) -> None:
        self.adder = adder
        self.configurer = configurer
        self.context_setter = context_setter
        self.catalog = catalog

    def _accept_component(
        self,
        tree: ComponentTree,
        node: ComponentNode,
        previous: ComponentNode | None,
        *,
        needs_context: bool,
    ) -> ComponentNode:
        tree.add_node(node, previous)
        if needs_context:
            self._set_context(tree, node, entering=True)
        self.adder.add_component(tree.parent_of(node), node)
        logger.debug("Added %s", node)
        return node

    def _accept_configuration(
        self,
        tree: ComponentTree,
        configuration: ConfigurationNode,
        previous: ComponentNode | None,
    ) -> ComponentNode | None:
        if previous is not None:
            self._set_context(tree, previous, entering=False)
        self.configurer.configure(previous.kind if previous is not None else None, configuration)
        return previous

    def _set_context(self, tree: ComponentTree, node: ComponentNode, *, entering: bool) -> None:
        selector = context_selector_for(tree, node)
        logger.debug("Context set to %r", selector)
        self.context_setter.set_context(tree, node, selector, entering)


class TreeViewAssembler(_Assembler):
    """Assembles a page from a tree-view document, one node per line."""

    def assemble(self, document: str) -> ComponentTree:
        """Classify, validate and assemble ``document``.

        Every line is classified and the whole document validated before the
        first collaborator call, so a malformed document has no side effects.

        Returns:
            The component tree built from the document.

        Raises:
            EmptyDocument: If the document is blank.
            ParseError, ConfigurationError, StructuralError: For malformed lines
                and depth violations.
        """
        if not document.strip():
            raise EmptyDocument("There is no component tree to process. It should not be blank.")
        nodes: list[Node] = [classify_line(line, self.catalog) for line in document.splitlines()]
        validate_nodes(nodes)

        tree = ComponentTree()
        previous: ComponentNode | None = None
        last = len(nodes) - 1
        for index, node in enumerate(nodes):
            previous = self._step(tree, node, previous, has_next=index < last)
        logger.debug("Assembled %d components from %d lines", len(tree), len(nodes))
        return tree

    def _step(
        self,
        tree: ComponentTree,
        node: Node,
        previous: ComponentNode | None,
        *,
        has_next: bool,
    ) -> ComponentNode | None:
        if isinstance(node, ConfigurationNode):
            return self._accept_configuration(tree, node, previous)

        inline_config = node.inline_config
        self._accept_component(
            tree, node, previous, needs_context=has_next or inline_config is not None
        )
        if inline_config is not None:
            self.configurer.configure(node.kind, inline_config)
        return node


@dataclass
class _TableEntry:
    row: TableRow
    component: ComponentNode | None
    configuration: ConfigurationNode | None


class TableAssembler(_Assembler):
    """Assembles a page from table rows of component and configuration cells."""

    def assemble(self, rows: Sequence[TableRow]) -> ComponentTree:
        """Classify, validate and assemble ``rows``.

        Raises:
            EmptyDocument: If there are no rows.
            NoComponentDefined: If no row defines a component.
            MisplacedRootConfiguration: If a ``<`` row follows a component.
            EmptyRootConfiguration: If a ``<`` row has no configuration.
            ParseError, ConfigurationError, StructuralError: For malformed cells
                and depth violations.
        """
        if not rows:
            raise EmptyDocument("There is no table entry to process. It should not be empty.")
        validate_table_rows(list(rows))
        entries = [self._classify(row) for row in rows]
        _validate_root_configurations(entries)
        validate_nodes(entry.component for entry in entries if entry.component is not None)

        tree = ComponentTree()
        previous: ComponentNode | None = None
        last = len(entries) - 1
        for index, entry in enumerate(entries):
            previous = self._step(tree, entry, previous, has_next=index < last)
        logger.debug("Assembled %d components from %d rows", len(tree), len(entries))
        return tree

    def _classify(self, row: TableRow) -> _TableEntry:
        component = None
        if row.has_component_definition() and not row.has_root_level_configuration():
            component = classify_component_cell(row.component, self.catalog)
        configuration = None
        if row.has_configuration():
            configuration = classify_configuration_cell(row.configuration)
        return _TableEntry(row=row, component=component, configuration=configuration)

    def _step(
        self,
        tree: ComponentTree,
        entry: _TableEntry,
        previous: ComponentNode | None,
        *,
        has_next: bool,
    ) -> ComponentNode | None:
        if entry.row.has_root_level_configuration():
            self.configurer.configure(None, entry.configuration)
            return previous

        if entry.component is None:
            # Continuation row: configuration of the latest component.
            return self._accept_configuration(tree, entry.configuration, previous)

        node = self._accept_component(
            tree, entry.component, previous, needs_context=has_next or entry.configuration is not None
        )
        if entry.configuration is not None:
            self.configurer.configure(node.kind, entry.configuration)
        return node


def _validate_root_configurations(entries: list[_TableEntry]) -> None:
    seen_component = False
    for entry in entries:
        if entry.row.has_root_level_configuration():
            if seen_component:
                raise MisplacedRootConfiguration(
                    "Root level configuration should only be defined in the first row of the data table."
                )
            if entry.configuration is None:
                raise EmptyRootConfiguration(
                    "Root level configuration definition is empty. It should contain some actual configurations."
                )
        elif entry.component is not None:
            seen_component = True


def assemble_tree_view(
    document: str,
    collaborator: SelectorRecorder | None = None,
    *,
    catalog: NodeCatalog = DEFAULT_CATALOG,
) -> tuple[ComponentTree, SelectorRecorder]:
    """Assemble a tree-view document against a recording collaborator."""
    recorder = collaborator or SelectorRecorder()
    tree = TreeViewAssembler(recorder, recorder, recorder, catalog=catalog).assemble(document)
    return tree, recorder


def assemble_table(
    rows: Sequence[TableRow],
    collaborator: SelectorRecorder | None = None,
    *,
    catalog: NodeCatalog = DEFAULT_CATALOG,
) -> tuple[ComponentTree, SelectorRecorder]:
    """Assemble table rows against a recording collaborator."""
    recorder = collaborator or SelectorRecorder()
    tree = TableAssembler(recorder, recorder, recorder, catalog=catalog).assemble(rows)
    return tree, recorder
