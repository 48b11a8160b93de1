from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Marker:
    """Stand-in node returned by the child enumerator for gaps in the tree.

    ``type`` is one of ``Null``, ``Unknown`` or ``Invalid``; ``body`` holds the
    value that could not be enumerated.
    """
    type: str
    body: Any = None


@dataclass(frozen=True)
class TraversalFrame:
    """A node waiting on the discovery stack, with its enclosing class name."""
    node: Any
    enclosing_class: str | None = None


@dataclass(frozen=True)
class DocumentableEntity:
    """A construct found in the tree that is eligible for the catalog."""
    kind: str  # class, function, variable or method
    node: Any
    enclosing_class: str | None = None
    declaration_keyword: str | None = None  # var/let/const, variables only


@dataclass(frozen=True)
class LocationInfo:
    """Position of a header in the source (1-indexed line, 0-indexed indent)."""
    line: int
    indent: int

    @property
    def found(self) -> bool:
        return self.line >= 1 and self.indent >= 0


NOT_FOUND = LocationInfo(line=-1, indent=-1)


@dataclass
class EntityDescriptor:
    """A located entity as reported in the catalog."""
    kind: str
    line: int
    indent: int
    header: str
    enclosing_class: str | None = None
    params: list[str] | None = None  # None for classes
    declaration_keyword: str | None = None
    name: str = ""  # Entity name (for filtering, not included in JSON output)

    def to_dict(self) -> dict:
        """Convert to the JSON output shape, omitting absent optional fields."""
        result = {
            "kind": self.kind,
            "line": self.line,
            "indent": self.indent,
            "header": self.header,
        }
        if self.enclosing_class is not None:
            result["class"] = self.enclosing_class
        if self.params is not None:
            result["params"] = list(self.params)
        if self.declaration_keyword is not None:
            result["declaration"] = self.declaration_keyword
        return result
