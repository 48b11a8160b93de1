import logging

from jsscribe.models import DocumentableEntity, TraversalFrame
from jsscribe.visitor import get_children

logger = logging.getLogger(__name__)

FUNCTION_DECLARATIONS = ("function_declaration", "generator_function_declaration")
FUNCTION_VALUES = ("function_expression", "function", "generator_function", "arrow_function")
VARIABLE_DECLARATIONS = ("variable_declaration", "lexical_declaration")


def node_text(node) -> str:
    """Decode the source text spanned by a tree-sitter node."""
    return node.text.decode("utf8") if node.text is not None else ""


def _frames(nodes, enclosing_class):
    # Reversed so the first child is popped first.
    return [TraversalFrame(n, enclosing_class) for n in reversed(nodes)]


def documentables(root, include_exports: bool = True) -> list[DocumentableEntity]:
    """Find the functions, classes, methods and function-valued variables.

    Only the program's direct statements and the members of top-level classes
    are considered; nested closures and object-literal methods are not.

    Args:
        root: The program node produced by the parser
        include_exports: Look through ``export`` statements at their declarations

    Returns:
        Entities in source order
    """
    stack = [TraversalFrame(root, None)]
    found = []

    while stack:
        frame = stack.pop()
        node = frame.node
        kind = node.type

        if kind == "program":
            stack.extend(_frames(get_children(node), None))

        elif kind == "export_statement":
            if include_exports:
                stack.extend(_frames(get_children(node), frame.enclosing_class))

        elif kind == "class_declaration":
            name_node = node.child_by_field_name("name")
            class_name = node_text(name_node)
            found.append(DocumentableEntity(kind="class", node=node))
            stack.extend(_frames(get_children(node), class_name))

        elif kind in FUNCTION_DECLARATIONS:
            found.append(DocumentableEntity(
                kind="function",
                node=node,
                enclosing_class=frame.enclosing_class,
            ))

        elif kind in VARIABLE_DECLARATIONS:
            keyword = node.children[0].type  # var, let or const
            for declarator in get_children(node):
                if declarator.type != "variable_declarator":
                    continue
                value = declarator.child_by_field_name("value")
                if value is not None and value.type in FUNCTION_VALUES:
                    found.append(DocumentableEntity(
                        kind="variable",
                        node=declarator,
                        enclosing_class=frame.enclosing_class,
                        declaration_keyword=keyword,
                    ))

        elif kind == "class_body":
            for member in get_children(node):
                if member.type == "method_definition":
                    found.append(DocumentableEntity(
                        kind="method",
                        node=member,
                        enclosing_class=frame.enclosing_class,
                    ))

    logger.debug(f"Discovered {len(found)} documentable entities")
    return found
