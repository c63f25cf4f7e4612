"""Custom exceptions for pagetree."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagetree.schemas import ComponentNode


class PagetreeError(Exception):
    """Base exception for pagetree operations."""


class ParseError(PagetreeError):
    """Error while classifying a raw line or table cell."""

    def __init__(self, message: str, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text


class ConfigurationError(PagetreeError):
    """Error while parsing a configuration payload."""


class StructuralError(PagetreeError):
    """Error in the shape of the component tree."""


class AssemblyError(PagetreeError):
    """Error while driving the assembly of a document."""


class UnrecognizedLine(ParseError):
    """Line matches neither a component nor a configuration shape."""


class UnknownNodeKind(ParseError):
    """Identifier is not a known paragraph or modifier kind."""


class MissingInlineConfig(ParseError):
    """Inline configuration marker (>>) without a configuration after it."""


class TrailingDelimiter(ParseError):
    """Configuration ends with an item delimiter, e.g. ``key: value,``."""


class InvalidConfiguration(ConfigurationError):
    """Configuration payload is blank."""


class MissingKeyValueDelimiter(ParseError, ConfigurationError):
    """Configuration entry without a key/value delimiter."""


class InvalidNodeLevel(StructuralError):
    """Component node level is less than one."""


class InvalidOccurrence(StructuralError):
    """Occurrence count under parent is less than one."""


class DuplicateNode(StructuralError):
    """The same node object was added to a tree twice."""


class NodeNotInTree(StructuralError):
    """The node was never added to the tree being queried."""


class DepthViolation(StructuralError):
    """A component node is placed at an invalid depth relative to the previous one."""

    def __init__(
        self,
        message: str,
        previous: ComponentNode | None,
        current: ComponentNode,
    ) -> None:
        super().__init__(f"{message}\nParent was: [{previous}]\nChild was: [{current}]")
        self.previous = previous
        self.current = current


class ModifierMustAttachAtSiblingLevel(DepthViolation):
    """Modifier declared deeper than the node it annotates."""


class ExcessiveDepthJump(DepthViolation):
    """Child declared more than one level below the previous node."""


class EmptyNodeSequence(AssemblyError):
    """No nodes were given to build a selector from."""


class EmptyDocument(AssemblyError):
    """Nothing to assemble: blank tree view or empty table."""


class NoComponentDefined(AssemblyError):
    """No table row defines a component."""


class MisplacedRootConfiguration(AssemblyError):
    """Root level configuration after a component was already accepted."""


class EmptyRootConfiguration(AssemblyError):
    """Root level configuration row without any configuration."""


class SnapshotError(PagetreeError):
    """A selector could not be evaluated against an HTML snapshot."""
