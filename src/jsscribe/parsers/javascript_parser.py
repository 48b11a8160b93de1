import logging

import tree_sitter_javascript
from tree_sitter import Language, Parser

from jsscribe.config import ScanConfig
from jsscribe.discovery import documentables
from jsscribe.errors import JavaScriptSyntaxError
from jsscribe.metadata import metainfo
from jsscribe.models import EntityDescriptor
from jsscribe.parsers.base import BaseParser
from jsscribe.visitor import find_unknown_kinds

logger = logging.getLogger(__name__)


def first_error_node(root):
    """Return the first ERROR or missing node in source order, if any."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


class JavaScriptParser(BaseParser):
    """Parser for locating documentable entities in JavaScript using tree-sitter."""

    def __init__(self, config: ScanConfig | None = None):
        self.language = Language(tree_sitter_javascript.language())
        self.parser = Parser(self.language)
        self.config = config or ScanConfig()

    def parse(self, source_code: str):
        """Parse JavaScript source into a tree-sitter program node.

        Raises:
            JavaScriptSyntaxError: If the tree contains ERROR or missing nodes
        """
        tree = self.parser.parse(bytes(source_code, "utf8"))
        root = tree.root_node
        if root.has_error:
            bad = first_error_node(root) or root
            row, column = bad.start_point
            detail = f"missing '{bad.type}'" if bad.is_missing else "syntax error"
            logger.debug(f"Parse failed: {detail} at {row + 1}:{column}")
            raise JavaScriptSyntaxError(line=row + 1, column=column, detail=detail)
        return root

    def extract_entities(self, source_code: str) -> list[EntityDescriptor]:
        """Locate functions, classes, methods and function-valued variables.

        Args:
            source_code: JavaScript source code

        Returns:
            List of EntityDescriptor objects in source order
        """
        root = self.parse(source_code)

        if logger.isEnabledFor(logging.DEBUG):
            gaps = find_unknown_kinds(root)
            if gaps:
                logger.debug(f"Node kinds missing from the child table: {dict(gaps)}")

        entities = documentables(root, include_exports=self.config.include_exports)
        return metainfo(entities, source_code, self.config)
